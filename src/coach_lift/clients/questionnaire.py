"""Interactive program questionnaire."""

import math

import questionary
from questionary import Style

from ..models.exercises import Equipment
from ..models.questionnaire import (
    MAX_DURATION,
    MIN_DURATION,
    ExperienceLevel,
    Objective,
    ProgramFormData,
    SplitType,
)

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)

EQUIPMENT_LABELS = {
    Equipment.BARBELL_DUMBBELLS: "Barre et haltères",
    Equipment.BODYWEIGHT_STATION: "Barre de traction / station dips",
    Equipment.MACHINES: "Machines guidées",
}

ONE_RM_QUESTIONS = [
    ("squat_1rm", "Squat - 1RM en kg:"),
    ("bench_1rm", "Développé couché - 1RM en kg:"),
    ("deadlift_1rm", "Soulevé de terre - 1RM en kg:"),
    ("ohp_1rm", "Développé militaire - 1RM en kg:"),
]


def _is_number(text: str) -> bool | str:
    try:
        value = float(text.replace(",", "."))
    except ValueError:
        return "Entrez un nombre"
    return True if math.isfinite(value) and value > 0 else "Entrez un nombre positif"


def _is_duration(text: str) -> bool | str:
    if not text.isdigit():
        return "Entrez un nombre de minutes"
    if not MIN_DURATION <= int(text) <= MAX_DURATION:
        return f"Entre {MIN_DURATION} et {MAX_DURATION} minutes"
    return True


class QuestionnaireClient:
    """Collects program questionnaire answers in the terminal."""

    async def collect_form(self) -> ProgramFormData:
        """Run the questionnaire.

        Raises:
            KeyboardInterrupt: if the user aborts a question
        """
        print("\n=== Questionnaire programme ===\n")

        objective = await self._ask(
            questionary.select(
                "Quel est votre objectif ?",
                choices=[questionary.Choice(o.value, o) for o in Objective],
                style=custom_style,
            )
        )

        experience = await self._ask(
            questionary.select(
                "Quelle est votre expérience ?",
                choices=[questionary.Choice(e.value, e) for e in ExperienceLevel],
                style=custom_style,
            )
        )

        split = await self._ask(
            questionary.select(
                "Quel type de split préférez-vous ?",
                choices=[questionary.Choice(s.value, s) for s in SplitType],
                style=custom_style,
            )
        )

        training_days = await self._ask(
            questionary.select(
                "Combien de jours par semaine ?",
                choices=[str(n) for n in range(1, 8)],
                default="3",
                style=custom_style,
            )
        )

        max_duration = await self._ask(
            questionary.text(
                "Durée maximale d'une séance (minutes):",
                default="60",
                validate=_is_duration,
                style=custom_style,
            )
        )

        equipment = await self._ask(
            questionary.checkbox(
                "Quel matériel avez-vous ? (aucun = poids du corps)",
                choices=[questionary.Choice(label, eq) for eq, label in EQUIPMENT_LABELS.items()],
                style=custom_style,
            )
        )

        answers = {
            "objective": objective,
            "experience": experience,
            "split": split,
            "training_days": training_days,
            "max_duration": max_duration,
            "equipment": equipment,
        }

        if objective.is_percentage_based:
            print("\nLe programme 5/3/1 se calcule à partir de vos 1RM.\n")
            for key, question in ONE_RM_QUESTIONS:
                answers[key] = (
                    await self._ask(
                        questionary.text(question, validate=_is_number, style=custom_style)
                    )
                ).replace(",", ".")

        return ProgramFormData.from_dict(answers)

    @staticmethod
    async def _ask(question: questionary.Question):
        answer = await question.ask_async()
        if answer is None:
            raise KeyboardInterrupt
        return answer
