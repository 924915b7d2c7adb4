"""Program generators."""

from ..models.exercises import ExerciseCatalog, default_catalog
from ..models.program import Program
from ..models.questionnaire import ProgramFormData
from .config import GeneratorConfig, round_to_increment
from .five_three_one import FiveThreeOneGenerator, compute_training_max
from .generic import GenericProgramGenerator


def generate_program(
    form: ProgramFormData,
    catalog: ExerciseCatalog | None = None,
    config: GeneratorConfig | None = None,
) -> Program:
    """Generate a program from questionnaire answers.

    Pure and synchronous. Powerlifting and powerbuilding objectives get a
    5/3/1 cycle; every other objective gets the generic split program.
    Callers must check `Program.is_error` before using the result.
    """
    if catalog is None:
        catalog = default_catalog()
    if form.objective.is_percentage_based:
        generator = FiveThreeOneGenerator(catalog, config)
    else:
        generator = GenericProgramGenerator(catalog, config)
    return generator.generate(form)


__all__ = [
    "compute_training_max",
    "FiveThreeOneGenerator",
    "generate_program",
    "GenericProgramGenerator",
    "GeneratorConfig",
    "round_to_increment",
]
