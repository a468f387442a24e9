"""Employment law topics."""
from navigator.models.legal import LegalDomain
from navigator.schemas.legal import LegalTopic, LegalScenario

EMPLOYMENT_TOPICS: dict[str, LegalTopic] = {
    "employment-contract": LegalTopic(
        domain=LegalDomain.employment,
        topic="Employment Contracts and Labor Standards",
        description="Thai labor law establishes minimum standards for employment relationships and working conditions.",
        relevant_laws=[
            "Labor Protection Act B.E. 2541 (1998)",
            "Labor Relations Act B.E. 2518 (1975)",
            "Social Security Act B.E. 2533 (1990)",
        ],
        key_points=[
            "Written employment contract recommended but not legally required for all positions",
            "Maximum working hours: 8 hours/day, 48 hours/week (general work)",
            "Overtime: 1.5x regular rate for weekday OT, 3x for holidays",
            "Minimum wage varies by province",
            "Annual leave: minimum 6 days per year after 1 year of service",
            "Sick leave: 30 days per year with medical certificate",
        ],
        common_scenarios=[
            LegalScenario(
                scenario="Starting employment with written contract",
                what_the_law_says=(
                    "Contracts must comply with Labor Protection Act minimum standards; where a contract is "
                    "silent, the legal minimums apply."
                ),
                required_steps=[
                    "Review employment contract carefully",
                    "Verify working hours, overtime and leave entitlements",
                    "Register for Social Security",
                ],
                typical_documents=[
                    "Employment contract (Thai and English)",
                    "Job description",
                    "Social Security registration",
                ],
                notes=["Contract terms cannot be less favorable than legal minimums"],
            ),
            LegalScenario(
                scenario="Overtime work requirements",
                what_the_law_says=(
                    "Overtime is limited to 36 hours per week and requires employee consent. It is paid at 1.5x "
                    "(weekdays), 2x or 3x (holidays)."
                ),
                prohibitions=[
                    "Cannot force overtime without employee consent",
                    "Cannot use 'salary includes overtime' clause to avoid overtime pay",
                ],
                notes=["Certain positions are exempt from overtime rules (managerial, professional)"],
            ),
        ],
        restrictions=[
            "Cannot pay below minimum wage",
            "Cannot exceed maximum working hours limits",
            "Cannot deprive employee of minimum statutory benefits",
        ],
        official_resources=[
            "Department of Labor Protection and Welfare (www.labour.go.th)",
            "Social Security Office",
            "Labor Court (for disputes)",
        ],
        disclaimers=[
            "Contracts should be reviewed by legal professionals",
            "This is information only, not legal advice",
        ],
    ),
    "termination-severance": LegalTopic(
        domain=LegalDomain.employment,
        topic="Employment Termination and Severance Pay",
        description=(
            "Thai labor law regulates how employment relationships can be terminated "
            "and requires severance pay in certain circumstances."
        ),
        relevant_laws=["Labor Protection Act B.E. 2541 (1998)", "Labor Relations Act"],
        key_points=[
            "Notice period depends on contract and tenure (typically 1 month for monthly employees)",
            "Severance pay is required for termination by employer without cause",
            "No severance if the employee resigns, for serious misconduct, or at end of a fixed-term contract",
            "Unfair dismissal protections exist",
        ],
        common_scenarios=[
            LegalScenario(
                scenario="Employer terminating without cause (redundancy, restructuring)",
                what_the_law_says="The employer must pay severance based on length of service.",
                required_steps=[
                    "Provide advance notice (per contract or law)",
                    "Pay severance, outstanding wages and unused leave",
                    "Provide employment certificate",
                ],
                notes=[
                    "Severance: under 1 year 30 days, 1-3 years 90 days, 3-6 years 180 days, "
                    "6-10 years 240 days, 10-20 years 300 days, 20+ years 400 days of wages",
                ],
            ),
            LegalScenario(
                scenario="Employee resignation (voluntary)",
                what_the_law_says="Employees may resign with proper notice; no severance is due.",
                required_steps=[
                    "Provide written resignation letter",
                    "Work notice period or negotiate immediate release",
                    "Receive final wages and unused leave payment",
                ],
            ),
            LegalScenario(
                scenario="Termination for serious misconduct",
                what_the_law_says=(
                    "Immediate termination without severance is allowed for serious misconduct such as "
                    "dishonesty, willful disobedience or assault."
                ),
                prohibitions=[
                    "Employer must have clear evidence of misconduct",
                    "Minor infractions do not justify summary dismissal",
                ],
                notes=["Unfair dismissal claims can be filed with Labor Court"],
            ),
        ],
        penalties=[
            "Unfair dismissal: reinstatement or compensation up to 1 year wages",
            "Failure to pay severance: employee can sue for payment plus damages",
        ],
        official_resources=[
            "Department of Labor Protection and Welfare",
            "Labor Court",
        ],
        disclaimers=[
            "Unfair dismissal claims should be filed within 60 days",
            "This is information only, not legal advice",
        ],
    ),
}
