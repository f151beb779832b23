"""
Vancouver-area school catalog.

Raw records, validated into SchoolRecord by catalog.loader at startup.
Tuition is a number (annual amount), "Free", or descriptive text when the
amount varies. Data as of December 2024.
"""

SCHOOL_DATA = [
    # === PRIVATE SCHOOLS ===
    {
        "id": "collingwood",
        "name": "Collingwood School",
        "category": "private",
        "level_band": "k12",
        "grade_range": "JK-12",
        "location": "West Vancouver",
        "tuition": 42000,
        "specialty_tags": ["Four Strand Education", "Round Square", "Advanced Placement"],
        "feature_tags": ["Two campus locations", "1:8 teacher ratio", "20+ AP courses", "100% university acceptance"],
        "description": "Premier independent school with Four Strand approach: Academics, Arts, Athletics, Service. Only Round Square school in Greater Vancouver.",
        "competitiveness": "extremely_high",
        "application_deadline": "November 1",
        "website": "https://www.collingwood.org",
        "tour_dates": "September-October (by appointment)",
        "financial_aid": True,
    },
    {
        "id": "mulgrave",
        "name": "Mulgrave School",
        "category": "private",
        "level_band": "k12",
        "grade_range": "PK3-12",
        "location": "West Vancouver",
        "tuition": 38500,
        "specialty_tags": ["IB World School", "International Education", "Technology Integration"],
        "feature_tags": ["27-acre campus", "IB Program K-12", "40+ countries represented", "No agents policy"],
        "description": "International Baccalaureate World School with diverse student body from 40+ countries. Strong technology integration and global perspective.",
        "competitiveness": "extremely_high",
        "application_deadline": "December 2, 2024",
        "website": "https://www.mulgrave.com",
        "tour_dates": "September onwards (book online)",
        "financial_aid": True,
        "ssat_required": False,
    },
    {
        "id": "st-georges",
        "name": "St. George's School",
        "category": "private",
        "level_band": "k12",
        "grade_range": "K-12",
        "location": "Vancouver (Point Grey)",
        "tuition": 35000,
        "specialty_tags": ["Boys Education", "Leadership Development", "Boarding School"],
        "feature_tags": ["Boys-only education", "Boarding available", "25-acre campus", "Video application for Gr 8+"],
        "description": "Independent boys school with day and boarding options. Strong leadership development and character building focus.",
        "competitiveness": "extremely_high",
        "application_deadline": "November 1 (K, Gr 4-11), January 31 (Gr 1-3)",
        "website": "https://www.stgeorges.bc.ca",
        "tour_dates": "October-November",
        "financial_aid": True,
        "ssat_required": False,
    },
    {
        "id": "crofton-house",
        "name": "Crofton House School",
        "category": "private",
        "level_band": "k12",
        "grade_range": "JK-12",
        "location": "Vancouver (Kerrisdale)",
        "tuition": 32000,
        "specialty_tags": ["Girls Education", "Girl-Centered Learning", "Leadership"],
        "feature_tags": ["Girls-only education", "Founded 1898", "Strong alumnae network", "Heritage building"],
        "description": "Independent day school for girls emphasizing girl-centered education and developing confident, capable young women.",
        "competitiveness": "extremely_high",
        "application_deadline": "November 15 (JK/SK), December 3 (Gr 6/8), December 3 (others)",
        "website": "https://www.croftonhouse.ca",
        "tour_dates": "October-November",
        "financial_aid": True,
    },
    {
        "id": "york-house",
        "name": "York House School",
        "category": "private",
        "level_band": "k12",
        "grade_range": "JK-12",
        "location": "Vancouver (Shaughnessy)",
        "tuition": 34000,
        "specialty_tags": ["Girls Education", "Innovation", "Global Citizenship"],
        "feature_tags": ["Girls-only education", "Heritage mansion campus", "$1M+ financial aid annually", "Innovation focus"],
        "description": "Independent day school for girls focusing on innovation, collaboration, and global citizenship in beautiful heritage setting.",
        "competitiveness": "extremely_high",
        "application_deadline": "November 15 (JK/SK), December 3 (Gr 8), February 1 (others)",
        "website": "https://www.yorkhouse.ca",
        "tour_dates": "Fall tours available",
        "financial_aid": True,
    },
    {
        "id": "west-point-grey-academy",
        "name": "West Point Grey Academy",
        "category": "private",
        "level_band": "k12",
        "grade_range": "JK-12",
        "location": "Vancouver (Point Grey)",
        "tuition": 33000,
        "specialty_tags": ["Co-Educational", "Academic Excellence", "Innovation"],
        "feature_tags": ["Co-educational", "SSAT required Gr 8+", "In-person assessments", "No sibling guarantee"],
        "description": "Independent co-educational school emphasizing academic excellence, innovation, and character development.",
        "competitiveness": "extremely_high",
        "application_deadline": "December 3",
        "website": "https://www.wpga.ca",
        "tour_dates": "October-November",
        "financial_aid": True,
        "ssat_required": True,
    },
    {
        "id": "stratford-hall",
        "name": "Stratford Hall IB World School",
        "category": "private",
        "level_band": "k12",
        "grade_range": "K-12",
        "location": "Vancouver (UBC area)",
        "tuition": 30000,
        "specialty_tags": ["IB World School", "International Mindedness", "Academic Excellence"],
        "feature_tags": ["Full IB Continuum", "SSAT required Gr 6+", "International fee $10,000", "No consultants policy"],
        "description": "IB World School offering Primary Years, Middle Years, and Diploma Programmes with focus on international mindedness.",
        "competitiveness": "very_high",
        "application_deadline": "November 15 (K/Gr 1/Gr 6), November 30 (others)",
        "website": "https://www.stratfordhall.ca",
        "tour_dates": "October-November",
        "financial_aid": False,
        "ssat_required": True,
    },
    {
        "id": "vancouver-college",
        "name": "Vancouver College",
        "category": "religious",
        "level_band": "k12",
        "grade_range": "K-12",
        "location": "Vancouver (Shaughnessy)",
        "tuition": 25000,
        "specialty_tags": ["Catholic Education", "Boys Education", "Character Formation"],
        "feature_tags": ["Catholic boys education", "Grade 7 & 8 main entry", "Character formation", "Spiritual development"],
        "description": "Catholic independent day school for boys emphasizing academic excellence, character formation, and spiritual development.",
        "competitiveness": "very_high",
        "application_deadline": "December 13",
        "website": "https://www.vancouvercollege.ca",
        "tour_dates": "October-November",
        "financial_aid": True,
    },
    {
        "id": "southridge",
        "name": "Southridge School",
        "category": "private",
        "level_band": "k12",
        "grade_range": "JK-12",
        "location": "Surrey",
        "tuition": 28000,
        "specialty_tags": ["Co-Educational", "Academic Excellence", "Character Development"],
        "feature_tags": ["Co-educational", "Surrey location", "$200K+ bursaries annually", "680 students"],
        "description": "Independent co-educational school in Surrey focused on academic excellence, character development, and community service.",
        "competitiveness": "high",
        "application_deadline": "December 1",
        "website": "https://www.southridge.ca",
        "tour_dates": "October-November",
        "financial_aid": True,
    },
    {
        "id": "meadowridge",
        "name": "Meadowridge School",
        "category": "private",
        "level_band": "k12",
        "grade_range": "JK-12",
        "location": "Maple Ridge",
        "tuition": 25000,
        "specialty_tags": ["IB World School", "Co-Educational", "Character Development"],
        "feature_tags": ["IB World School", "Natural setting", "Character focus", "Mountain view campus"],
        "description": "IB World School in Maple Ridge emphasizing academic excellence, character development, and community in beautiful natural setting.",
        "competitiveness": "high",
        "application_deadline": "November 30 (JK/K), December 31 (Gr 1-11)",
        "website": "https://www.meadowridge.bc.ca",
        "tour_dates": "Student-led tours available",
        "financial_aid": True,
    },
    {
        "id": "brockton-school",
        "name": "Brockton School",
        "category": "private",
        "level_band": "k12",
        "grade_range": "JK-12",
        "location": "North Vancouver",
        "tuition": 36000,
        "specialty_tags": ["IB World Continuum", "Gender-Inclusive", "Holistic Learning"],
        "feature_tags": ["Full IB Continuum", "Gender-inclusive", "Secular school", "North Vancouver location"],
        "description": "One of only two schools in BC offering the full IB World Continuum from Junior Kindergarten to Grade 12.",
        "competitiveness": "very_high",
        "application_deadline": "November-December",
        "website": "https://brocktonschool.com",
        "tour_dates": "October-November",
        "financial_aid": True,
    },
    {
        "id": "choice-gifted",
        "name": "Choice School for Gifted",
        "category": "private",
        "level_band": "elementary",
        "grade_range": "K-8",
        "location": "Richmond",
        "tuition": 20000,
        "specialty_tags": ["Gifted Education", "Small Classes", "Individual Attention"],
        "feature_tags": ["Only gifted school in BC", "7-8 students per class", "IQ testing required", "Individual programs"],
        "description": "Only designated school for gifted students in BC, offering individualized programs for academically gifted children.",
        "competitiveness": "extremely_high",
        "application_deadline": "February 28",
        "website": "https://choiceschoolforgifted.com",
        "tour_dates": "January-February",
        "financial_aid": False,
    },
    {
        "id": "vancouver-waldorf",
        "name": "Vancouver Waldorf School",
        "category": "alternative",
        "level_band": "k12",
        "grade_range": "Preschool-12",
        "location": "Vancouver",
        "tuition": 13000,
        "specialty_tags": ["Waldorf Pedagogy", "Arts Integration", "Nature-Based Learning"],
        "feature_tags": ["Waldorf pedagogy", "Arts integration", "Mixed-age learning", "Nature focus"],
        "description": "Holistic education following Waldorf pedagogy with emphasis on arts, nature, and child development.",
        "competitiveness": "moderate",
        "application_deadline": "Rolling admissions",
        "website": "https://www.vancouverwaldorf.ca",
        "tour_dates": "Monthly tours available",
        "financial_aid": True,
    },

    # === PUBLIC IB PROGRAMMES ===
    {
        "id": "churchill-ib",
        "name": "Sir Winston Churchill IB Programme",
        "category": "ib_program",
        "level_band": "high",
        "grade_range": "11-12",
        "location": "Vancouver",
        "tuition": "Free",
        "specialty_tags": ["International Baccalaureate", "University Preparation"],
        "feature_tags": ["Since 1983", "Free public program", "University preparation", "Community involvement"],
        "description": "Established IB Diploma Programme at Churchill Secondary, offering rigorous academic preparation for university.",
        "competitiveness": "high",
        "application_deadline": "December (for Grade 11 entry)",
        "website": "https://www.vsb.bc.ca/sir-winston-churchill",
        "tour_dates": "November Information Session",
        "financial_aid": False,
    },
    {
        "id": "west-vancouver-ib",
        "name": "West Vancouver Secondary IB Programme",
        "category": "ib_program",
        "level_band": "high",
        "grade_range": "11-12",
        "location": "West Vancouver",
        "tuition": "Free",
        "specialty_tags": ["International Baccalaureate", "Critical Thinking"],
        "feature_tags": ["Critical thinking test", "Admission interviews", "High standards", "Free program"],
        "description": "Competitive IB Programme with critical thinking test and rigorous academic standards.",
        "competitiveness": "very_high",
        "application_deadline": "January 31 (outside students), February 28 (WVSS students)",
        "website": "https://westvancouverschools.ca/ib",
        "tour_dates": "January 19 Information Night",
        "financial_aid": False,
    },
    {
        "id": "richmond-ib",
        "name": "Richmond Secondary IB Programme",
        "category": "ib_program",
        "level_band": "high",
        "grade_range": "11-12",
        "location": "Richmond",
        "tuition": "Free + fees",
        "specialty_tags": ["International Baccalaureate", "Multilingual Environment"],
        "feature_tags": ["Paper application required", "Grade 10 transcripts needed", "Program fees apply", "Diverse community"],
        "description": "IB Diploma Programme in Richmond with diverse student body and strong academic preparation.",
        "competitiveness": "high",
        "application_deadline": "December 16 - January 10",
        "website": "https://rhsib.wordpress.com",
        "tour_dates": "December 4 Information Night",
        "financial_aid": False,
    },
    {
        "id": "carson-graham-ib",
        "name": "Carson Graham Secondary IB Programme",
        "category": "ib_program",
        "level_band": "high",
        "grade_range": "11-12",
        "location": "North Vancouver",
        "tuition": "Free",
        "specialty_tags": ["International Baccalaureate", "University Preparation"],
        "feature_tags": ["Free public program", "Grade 10 preparation available", "North Shore location"],
        "description": "IB Diploma Programme offered at Carson Graham Secondary in North Vancouver School District.",
        "competitiveness": "high",
        "application_deadline": "February 18",
        "website": "https://www.sd44.ca/school/carson",
        "tour_dates": "February 11 Information Session",
        "financial_aid": False,
    },

    # === VSB MINI SCHOOLS ===
    {
        "id": "eric-hamber-challenge",
        "name": "Eric Hamber Challenge Studio",
        "category": "mini_school",
        "level_band": "high",
        "grade_range": "8-12",
        "location": "South Vancouver",
        "tuition": "Free",
        "specialty_tags": ["Creative Problem-Solving", "Project-Based Learning"],
        "feature_tags": ["Video application", "Small cohort", "Creative focus", "Grade 8 entry"],
        "description": "Innovative mini school focusing on creative problem-solving and project-based learning in small cohort setting.",
        "competitiveness": "very_high",
        "application_deadline": "December 19",
        "website": "https://www.vsb.bc.ca/schools/eric-hamber-secondary",
        "tour_dates": "October Information Night",
        "financial_aid": False,
    },
    {
        "id": "gladstone-secondary-mini",
        "name": "Gladstone Secondary - Mini School Enrichment Program",
        "category": "mini_school",
        "level_band": "high",
        "grade_range": "8-12",
        "location": "East Vancouver",
        "tuition": "Free",
        "specialty_tags": ["Academic Acceleration", "Leadership", "Community Service"],
        "feature_tags": ["Accelerated curriculum", "Leadership projects", "Service learning"],
        "description": "Academic acceleration (Grades 8-10 in two years), leadership development, and community-service focus.",
        "competitiveness": "very_high",
        "application_deadline": "December 19",
        "website": "https://www.vsb.bc.ca/schools/gladstone-secondary",
    },
    {
        "id": "killarney-computer-science-mini",
        "name": "Killarney Secondary - Computer Science Mini School",
        "category": "mini_school",
        "level_band": "high",
        "grade_range": "8-12",
        "location": "East Vancouver",
        "tuition": "Free",
        "specialty_tags": ["Programming", "Cyber Security", "Robotics"],
        "feature_tags": ["Coding labs", "Robotics club", "Security workshops"],
        "description": "Focus on computer science fundamentals, cybersecurity, robotics and system administration.",
        "competitiveness": "very_high",
        "application_deadline": "December 19",
        "website": "https://www.vsb.bc.ca/schools/killarney-secondary",
    },
    {
        "id": "john-oliver-tech-immersion",
        "name": "John Oliver Secondary - Tech Immersion Program",
        "category": "mini_school",
        "level_band": "high",
        "grade_range": "8-12",
        "location": "South Vancouver",
        "tuition": "Free",
        "specialty_tags": ["Digital Skills", "Technology Integration"],
        "feature_tags": ["Multimedia labs", "Coding courses", "Digital portfolios"],
        "description": "Immersive tech program covering software development, digital media, and emerging technologies.",
        "competitiveness": "very_high",
        "application_deadline": "December 19",
        "website": "https://www.vsb.bc.ca/schools/john-oliver-secondary",
    },
    {
        "id": "vancouver-technical-flex-humanities",
        "name": "Vancouver Technical Secondary - Flex Humanities Program",
        "category": "mini_school",
        "level_band": "high",
        "grade_range": "8-12",
        "location": "East Vancouver",
        "tuition": "Free",
        "specialty_tags": ["Humanities", "Liberal Arts"],
        "feature_tags": ["Small seminars", "Debate clubs", "Creative writing"],
        "description": "Humanities-focused enrichment with seminars in philosophy, history, and literature.",
        "competitiveness": "very_high",
        "application_deadline": "December 19",
        "website": "https://www.vsb.bc.ca/schools/vancouver-technical-secondary",
    },

    # === PUBLIC CHOICE PROGRAMS ===
    {
        "id": "french-immersion-vsb",
        "name": "French Immersion Program (VSB)",
        "category": "public",
        "level_band": "elementary",
        "grade_range": "K-12",
        "location": "Multiple Vancouver schools",
        "tuition": "Free",
        "specialty_tags": ["Bilingual Education", "French Language", "Cultural Immersion"],
        "feature_tags": ["50-80% French instruction", "12 school locations", "Public program", "Lottery system"],
        "description": "Public French immersion programs across Vancouver offering bilingual education in French and English.",
        "competitiveness": "moderate",
        "application_deadline": "February 4",
        "website": "https://www.vsb.bc.ca",
        "tour_dates": "January Information Sessions",
        "financial_aid": False,
    },
    {
        "id": "montessori-vsb",
        "name": "Montessori Programs (VSB)",
        "category": "public",
        "level_band": "elementary",
        "grade_range": "K-7",
        "location": "3 Vancouver schools",
        "tuition": "Free",
        "specialty_tags": ["Montessori Method", "Child-Centered Learning", "Multi-Age Classrooms"],
        "feature_tags": ["Mixed-age classrooms", "Hands-on materials", "Self-directed learning", "3 locations"],
        "description": "Public Montessori programs following authentic Montessori methodology with mixed-age classrooms.",
        "competitiveness": "moderate",
        "application_deadline": "February 4",
        "website": "https://www.vsb.bc.ca",
        "tour_dates": "January Information Sessions",
        "financial_aid": False,
    },

    # === INDEPENDENT & RELIGIOUS SCHOOLS ===
    {
        "id": "little-flower-academy",
        "name": "Little Flower Academy",
        "category": "religious",
        "level_band": "high",
        "grade_range": "8-12",
        "location": "Vancouver (South)",
        "tuition": 18000,
        "specialty_tags": ["Catholic Girls Education", "Academic Excellence", "Character Development"],
        "feature_tags": ["Girls-only education", "Catholic values", "AP courses", "Grade 8 main entry"],
        "description": "Catholic high school for girls offering challenging curriculum with AP courses and strong extracurricular programs.",
        "competitiveness": "high",
        "application_deadline": "November 29",
        "website": "https://www.lfabc.org",
        "tour_dates": "October Open House",
        "financial_aid": True,
    },
    {
        "id": "pacific-spirit-school",
        "name": "Pacific Spirit School",
        "category": "independent",
        "level_band": "elementary",
        "grade_range": "K-8",
        "location": "Vancouver (West)",
        "tuition": "Starting from $9,250 (sliding scale)",
        "specialty_tags": ["Play-Based Learning", "Arts Enrichment", "Outdoor Education"],
        "feature_tags": ["Small classes", "Minimal homework", "Parent involvement", "Bus service from East Vancouver"],
        "description": "Independent school following BC curriculum with play-based, arts-enriched programs and outdoor education focus.",
        "competitiveness": "moderate",
        "application_deadline": "Rolling admissions",
        "website": "https://www.pacificspiritschool.org",
        "tour_dates": "Year-round",
        "financial_aid": True,
    },
    {
        "id": "westside-montessori",
        "name": "Westside Montessori School",
        "category": "montessori",
        "level_band": "preschool",
        "grade_range": "Preschool-Kindergarten",
        "location": "Vancouver (West)",
        "tuition": 15000,
        "specialty_tags": ["Montessori Method", "Three-Year Program", "Child Development"],
        "feature_tags": ["Three-year commitment", "Lottery system", "Sibling priority", "Authentic Montessori"],
        "description": "Authentic Montessori preschool requiring three-year commitment including Kindergarten year.",
        "competitiveness": "high",
        "application_deadline": "On-going Year long",
        "website": "https://www.westsidemontessori.ca",
        "tour_dates": "January Annual Open House",
        "financial_aid": False,
    },
    {
        "id": "westside-montessori-academy",
        "name": "Westside Montessori Academy",
        "category": "montessori",
        "level_band": "elementary",
        "grade_range": "K-7",
        "location": "Vancouver",
        "tuition": 16000,
        "specialty_tags": ["Montessori Method", "Individualized Attention", "Community Involvement", "Co-Curricular Programs"],
        "feature_tags": ["Art, theatre & music programs", "Outdoor & indoor sports", "Yoga & language classes", "Parent/Child interviews"],
        "description": "Authentic Montessori education for Kindergarten through Grade 7, emphasizing self-directed learning, individualized attention, and community involvement.",
        "competitiveness": "high",
        "application_deadline": "December 6, 2024",
        "website": "https://www.westsidemontessoriacademy.ca/",
    },
    {
        "id": "richmond-christian-school",
        "name": "Richmond Christian School",
        "category": "religious",
        "level_band": "k12",
        "grade_range": "K-12",
        "location": "Richmond",
        "tuition": 16000,
        "specialty_tags": ["Christian Education", "Character Development", "Academic Excellence"],
        "feature_tags": ["Three campuses", "Christian worldview", "Established 1957", "Elementary to secondary"],
        "description": "Established in 1957, Richmond Christian School equips students to serve Christ with three campuses serving different grade levels.",
        "competitiveness": "moderate",
        "application_deadline": "Rolling admissions",
        "website": "https://myrcs.ca",
        "tour_dates": "Year-round",
        "financial_aid": True,
    },
    {
        "id": "canada-star-secondary",
        "name": "Canada Star Secondary School",
        "category": "independent",
        "level_band": "high",
        "grade_range": "8-12",
        "location": "Richmond",
        "tuition": 20000,
        "specialty_tags": ["University Preparation", "International Program", "BC Curriculum"],
        "feature_tags": ["University preparation focus", "International students welcome", "Founded 2013", "Safe environment"],
        "description": "Co-educational independent high school preparing students for top Canadian and U.S. universities.",
        "competitiveness": "moderate",
        "application_deadline": "Rolling admissions",
        "website": "https://canadastarsecondary.ca",
        "tour_dates": "Year-round",
        "financial_aid": False,
    },
    {
        "id": "chaoyin-bilingual",
        "name": "Chaoyin Bilingual School",
        "category": "independent",
        "level_band": "elementary",
        "grade_range": "K-7",
        "location": "Richmond",
        "tuition": 18000,
        "specialty_tags": ["Bilingual Education", "Mandarin Program", "Cultural Immersion"],
        "feature_tags": ["Mandarin-English bilingual", "Cultural immersion", "Independent learning", "Collaborative environment"],
        "description": "Canadian bilingual elementary school offering unique Mandarin language program with balanced development approach.",
        "competitiveness": "moderate",
        "application_deadline": "Rolling admissions",
        "website": "https://chaoyinschool.ca",
        "tour_dates": "Year-round",
        "financial_aid": False,
    },
    {
        "id": "st-helens-catholic",
        "name": "St. Helen's Catholic School",
        "category": "religious",
        "level_band": "elementary",
        "grade_range": "K-7",
        "location": "Burnaby",
        "tuition": 8000,
        "specialty_tags": ["Catholic Education", "Faith Formation", "Academic Excellence"],
        "feature_tags": ["101+ years history", "Catholic faith formation", "Parent involvement", "Fundraising programs"],
        "description": "Catholic elementary school celebrating 101+ years of providing Catholic education with academic excellence.",
        "competitiveness": "low",
        "application_deadline": "February",
        "website": "https://www.sthelensschool.ca",
        "tour_dates": "Year-round",
        "financial_aid": True,
    },
    {
        "id": "urban-academy",
        "name": "Urban Academy",
        "category": "independent",
        "level_band": "k12",
        "grade_range": "JK-12",
        "location": "New Westminster",
        "tuition": 24000,
        "specialty_tags": ["Small School", "Individualized Learning", "Arts & Innovation"],
        "feature_tags": ["Small school environment", "Individualized programs", "Arts focus", "Urban location"],
        "description": "Small independent school emphasizing individualized learning and arts integration in urban setting.",
        "competitiveness": "high",
        "application_deadline": "November 15 (JK/SK), January 1 (others)",
        "website": "https://www.urbanacademy.ca",
        "tour_dates": "Fall tours available",
        "financial_aid": True,
    },
    {
        "id": "cornerstone-christian-academy",
        "name": "Cornerstone Christian Academy",
        "category": "religious",
        "level_band": "k12",
        "grade_range": "K-12",
        "location": "Surrey",
        "tuition": 9500,
        "specialty_tags": ["Christian Education", "Biblical Worldview", "Character Building"],
        "feature_tags": ["Biblical worldview", "Character building", "Safe learning environment", "ACSI member"],
        "description": "Christian academy established in 1997, focusing on academic excellence and character building from biblical worldview.",
        "competitiveness": "low",
        "application_deadline": "Rolling admissions",
        "website": "https://www.cornerstonechristianacademy.ca",
        "tour_dates": "Year-round",
        "financial_aid": True,
    },
]
