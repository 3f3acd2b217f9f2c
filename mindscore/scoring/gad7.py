"""GAD-7 (Generalized Anxiety Disorder-7) definition.

The GAD-7 is a validated 7-item anxiety screening instrument, scored on
the same 0-3 frequency scale as the PHQ-9.

Total score ranges 0-21.

Severity bands:
- 0-4: Minimal
- 5-9: Mild
- 10-14: Moderate
- 15-21: Severe
"""

from mindscore.scoring.instruments import (
    MILD,
    MINIMAL,
    MODERATE,
    SEVERE,
    Instrument,
    SeverityBand,
    numbered_questions,
)
from mindscore.scoring.phq9 import FREQUENCY_SCALE

GAD7 = Instrument(
    id="anxiety",
    name="GAD-7",
    full_name="Generalized Anxiety Disorder-7",
    description="A screening tool to assess anxiety symptoms",
    estimated_time="2 minutes",
    questions=numbered_questions(
        "Feeling nervous, anxious, or on edge",
        "Not being able to stop or control worrying",
        "Worrying too much about different things",
        "Trouble relaxing",
        "Being so restless that it is hard to sit still",
        "Becoming easily annoyed or irritable",
        "Feeling afraid, as if something awful might happen",
    ),
    answer_options=FREQUENCY_SCALE,
    max_score=21,
    severity_bands=(
        SeverityBand(MINIMAL, max=4),
        SeverityBand(MILD, min=5, max=9),
        SeverityBand(MODERATE, min=10, max=14),
        SeverityBand(SEVERE, min=15),
    ),
)
