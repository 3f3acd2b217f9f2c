"""Patient-facing wording for severity levels."""

from dataclasses import dataclass

from mindscore.scoring.instruments import MILD, MINIMAL, MODERATE, MODERATELY_SEVERE, SEVERE


@dataclass(frozen=True)
class Interpretation:
    label: str
    description: str
    color: str


INTERPRETATIONS: dict[str, Interpretation] = {
    MINIMAL: Interpretation(
        label="Minimal",
        description="Your responses suggest minimal symptoms.",
        color="green",
    ),
    MILD: Interpretation(
        label="Mild",
        description="Your responses suggest mild symptoms.",
        color="yellow",
    ),
    MODERATE: Interpretation(
        label="Moderate",
        description=(
            "Your responses suggest moderate symptoms. "
            "Consider speaking with a healthcare professional."
        ),
        color="orange",
    ),
    MODERATELY_SEVERE: Interpretation(
        label="Moderately Severe",
        description=(
            "Your responses suggest moderately severe symptoms. "
            "We recommend consulting with a mental health professional."
        ),
        color="red",
    ),
    SEVERE: Interpretation(
        label="Severe",
        description=(
            "Your responses suggest severe symptoms. "
            "Please consult with a mental health professional as soon as possible."
        ),
        color="red",
    ),
}


def interpret(severity: str) -> Interpretation:
    """Return the interpretation for a severity, defaulting to minimal."""
    return INTERPRETATIONS.get(severity, INTERPRETATIONS[MINIMAL])
