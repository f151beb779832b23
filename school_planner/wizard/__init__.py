from .controller import WizardSession, WizardStep

__all__ = ["WizardSession", "WizardStep"]
