"""PHQ-9 (Patient Health Questionnaire-9) definition.

The PHQ-9 is a validated 9-item depression screening instrument.
Each item is scored 0-3:
- 0 = Not at all
- 1 = Several days
- 2 = More than half the days
- 3 = Nearly every day

Total score ranges 0-27.

Severity bands:
- 0-4: Minimal
- 5-9: Mild
- 10-14: Moderate
- 15-19: Moderately Severe
- 20-27: Severe

PHQ-9 is the only bundled instrument with a moderately-severe band.
"""

from mindscore.scoring.instruments import (
    MILD,
    MINIMAL,
    MODERATE,
    MODERATELY_SEVERE,
    SEVERE,
    Instrument,
    SeverityBand,
    likert_scale,
    numbered_questions,
)

FREQUENCY_SCALE = likert_scale(
    "Not at all",
    "Several days",
    "More than half the days",
    "Nearly every day",
)

PHQ9 = Instrument(
    id="depression",
    name="PHQ-9",
    full_name="Patient Health Questionnaire-9",
    description="A brief screening tool to assess depression severity",
    estimated_time="2-3 minutes",
    questions=numbered_questions(
        "Little interest or pleasure in doing things",
        "Feeling down, depressed, or hopeless",
        "Trouble falling or staying asleep, or sleeping too much",
        "Feeling tired or having little energy",
        "Poor appetite or overeating",
        "Feeling bad about yourself - or that you are a failure or have let "
        "yourself or your family down",
        "Trouble concentrating on things, such as reading the newspaper or "
        "watching television",
        "Moving or speaking so slowly that other people could have noticed. "
        "Or the opposite - being so fidgety or restless that you have been "
        "moving around a lot more than usual",
        "Thoughts that you would be better off dead, or of hurting yourself "
        "in some way",
    ),
    answer_options=FREQUENCY_SCALE,
    max_score=27,
    severity_bands=(
        SeverityBand(MINIMAL, max=4),
        SeverityBand(MILD, min=5, max=9),
        SeverityBand(MODERATE, min=10, max=14),
        SeverityBand(MODERATELY_SEVERE, min=15, max=19),
        SeverityBand(SEVERE, min=20),
    ),
)
