"""DLA-20 style functional impairment definition.

Twelve daily-living activities rated by difficulty, each scored 0-4
(None, Mild, Moderate, Severe, Extreme/Cannot do).

Total score ranges 0-48.

Severity bands:
- 0-11: Minimal
- 12-23: Mild
- 24-35: Moderate
- 36-48: Severe
"""

from mindscore.scoring.instruments import (
    MILD,
    MINIMAL,
    MODERATE,
    SEVERE,
    Instrument,
    SeverityBand,
    likert_scale,
    numbered_questions,
)

DLA20 = Instrument(
    id="dla20",
    name="DLA-20",
    full_name="Disability Assessment Schedule 2.0",
    description="A brief assessment of functional impairment",
    estimated_time="3 minutes",
    questions=numbered_questions(
        "Concentrating on doing something for ten minutes",
        "Remembering to do important things",
        "Analyzing and finding solutions to problems in day-to-day life",
        "Learning a new task, for example, learning how to get to a new place",
        "Standing for long periods such as 30 minutes",
        "Standing up from sitting down",
        "Moving around inside your home",
        "Washing your whole body",
        "Getting dressed",
        "Dealing with people you do not know",
        "Maintaining a friendship",
        "Your day-to-day work or school activities",
    ),
    answer_options=likert_scale(
        "None", "Mild", "Moderate", "Severe", "Extreme/Cannot do"
    ),
    max_score=48,
    severity_bands=(
        SeverityBand(MINIMAL, max=11),
        SeverityBand(MILD, min=12, max=23),
        SeverityBand(MODERATE, min=24, max=35),
        SeverityBand(SEVERE, min=36),
    ),
)
