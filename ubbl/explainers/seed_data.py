"""Embedded explainers for a handful of frequently consulted clauses.

Coverage is deliberately partial: many clauses have no explainer yet, and
some have one in English only.
"""

from __future__ import annotations

from ubbl.explainers.models import (
    BestPractice,
    CaseStudy,
    CommonViolation,
    Example,
    Explainer,
)

SEED_EXPLAINERS: list[Explainer] = [
    Explainer(
        clause_id="ubbl-1",
        language="en",
        simplified=(
            'This clause gives the official name of the regulations: "Uniform '
            'Building By-laws 1984".'
        ),
        detailed=(
            "Every submission, approval letter and professional report refers to "
            "the by-laws by this name. Citing it correctly avoids queries from the "
            "local authority."
        ),
        technical_notes="Legal citation format: UBBL 1984.",
        examples=[
            Example(
                title="Citation in building plans",
                description="Referencing the by-laws on a drawing title block",
                scenario="An architect submits plans to DBKL",
                solution='Plans state: "This design complies with the Uniform Building By-laws 1984."',
                building_type="commercial",
                location="Kuala Lumpur",
            ),
        ],
        common_violations=[
            CommonViolation(
                description="Incorrect citation format in official documents",
                severity="minor",
                common_causes=['Using abbreviations such as "UBBL 84"', "Omitting the year"],
                how_to_avoid=["Use the full title in all submissions"],
            ),
        ],
        learning_objectives=["Cite the by-laws correctly"],
        difficulty_level=1,
        estimated_read_time=2,
    ),
    Explainer(
        clause_id="ubbl-1",
        language="ms",
        simplified=(
            'Klausa ini menyatakan nama rasmi peraturan: "Undang-undang Kecil '
            'Bangunan Seragam 1984".'
        ),
        detailed=(
            "Setiap penyerahan, surat kelulusan dan laporan profesional merujuk "
            "undang-undang kecil ini dengan nama tersebut."
        ),
        learning_objectives=["Memetik undang-undang kecil dengan betul"],
        difficulty_level=1,
        estimated_read_time=2,
    ),
    Explainer(
        clause_id="ubbl-168",
        language="en",
        simplified=(
            "Exits must be wide enough for everyone in the building to leave "
            "quickly. Width is counted in 550 mm units, and the number of units "
            "depends on how many people occupy the storey."
        ),
        detailed=(
            "Divide the occupancy load by the number of persons one unit of exit "
            "width can discharge for the building's use, round up, and multiply by "
            "550 mm. The result is the minimum aggregate exit width, never less "
            "than 1.1 m."
        ),
        technical_notes="Seventh Schedule capacities; see also by-laws 165 and 169.",
        examples=[
            Example(
                title="Office floor with 400 occupants",
                description="Sizing exits for a commercial storey",
                scenario="A 400-person office floor with exits of 1.2 m total width",
                solution="400 / 50 = 8 units; 8 x 0.55 m = 4.4 m aggregate exit width required",
                building_type="commercial",
                location="Petaling Jaya",
            ),
        ],
        common_violations=[
            CommonViolation(
                description="Exit width sized for the typical rather than the peak occupancy",
                severity="critical",
                common_causes=["Using net lettable area instead of gross floor area"],
                how_to_avoid=["Compute occupancy load from the Fifth Schedule first"],
                penalty="Refusal of the certificate of completion and compliance",
            ),
        ],
        best_practices=[
            BestPractice(
                title="Design exits for future change of use",
                description="Size exits for the most onerous plausible occupancy",
                implementation_steps=[
                    "Identify likely future uses",
                    "Compute exit width for each",
                    "Adopt the largest",
                ],
                benefits=["Avoids costly re-submission on change of use"],
                cost_implications="Marginal increase in circulation area",
            ),
        ],
        case_studies=[
            CaseStudy(
                title="Shopping mall retrofit",
                project_name="Mid-Valley extension",
                location="Kuala Lumpur",
                building_type="commercial",
                challenge="Added retail units raised the occupancy load beyond exit capacity",
                solution="Two additional protected staircases were inserted",
                outcome="Fire certificate issued without conditions",
                lessons_learned=["Re-check exit width whenever tenancy layouts change"],
            ),
        ],
        calculators=["required_exit_width"],
        learning_objectives=["Compute the minimum aggregate exit width"],
        difficulty_level=4,
        estimated_read_time=8,
    ),
    Explainer(
        clause_id="ubbl-225",
        language="en",
        simplified=(
            "Buildings taller than 18 metres need automatic sprinklers approved by "
            "the Fire and Rescue Department (BOMBA)."
        ),
        common_violations=[
            CommonViolation(
                description="Sprinkler coverage omitted from car park levels",
                severity="critical",
                common_causes=["Treating open car parks as exempt without BOMBA agreement"],
                how_to_avoid=["Obtain written BOMBA confirmation of any exemption"],
            ),
        ],
        difficulty_level=2,
        estimated_read_time=3,
    ),
]
