from .constants import MAX_SELECTED_SCHOOLS
from .contracts import Selection


def toggle_selection(selection: Selection, school_id: str) -> Selection:
    """
    Add or remove a school id from the shortlist.

    A school already shortlisted is removed. Otherwise it is appended while
    there is room; once the shortlist is full the selection comes back
    unchanged. Callers compare lengths to detect a rejected addition.
    """
    selection = tuple(selection)
    if school_id in selection:
        return tuple(s for s in selection if s != school_id)
    if len(selection) < MAX_SELECTED_SCHOOLS:
        return selection + (school_id,)
    return selection


def remaining_slots(selection: Selection) -> int:
    return max(0, MAX_SELECTED_SCHOOLS - len(selection))


def is_full(selection: Selection) -> bool:
    return remaining_slots(selection) == 0
