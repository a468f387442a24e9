"""Business and commercial law topics."""
from navigator.models.legal import LegalDomain
from navigator.schemas.legal import LegalTopic, LegalScenario

BUSINESS_TOPICS: dict[str, LegalTopic] = {
    "company-formation": LegalTopic(
        domain=LegalDomain.business,
        topic="Company Formation in Thailand",
        description="Thai law allows several business entity types with different foreign ownership restrictions.",
        relevant_laws=[
            "Civil and Commercial Code",
            "Foreign Business Act B.E. 2542 (1999)",
            "Limited Partnership, Limited Company, Association and Foundation Act",
        ],
        key_points=[
            "Main entity types: Limited Company, Partnership, Branch Office, Representative Office",
            "Foreign ownership restrictions depend on business type",
            "Minimum 3 shareholders required for Limited Company",
            "Registered capital requirements vary by business type",
            "Foreign Business License required for certain businesses",
        ],
        common_scenarios=[
            LegalScenario(
                scenario="Forming a Thai Limited Company (majority Thai ownership)",
                what_the_law_says=(
                    "Limited companies need at least 3 shareholders. If foreign ownership exceeds certain "
                    "thresholds, the business may be subject to Foreign Business Act restrictions."
                ),
                required_steps=[
                    "Reserve company name with Department of Business Development (DBD)",
                    "Prepare Memorandum of Association and Articles of Association",
                    "Register company with DBD",
                    "Obtain Tax ID from Revenue Department",
                    "Register for VAT (if applicable) and Social Security",
                ],
                typical_documents=[
                    "Memorandum of Association",
                    "Articles of Association",
                    "Shareholder and director passports/IDs",
                    "Office lease agreement (registered office)",
                ],
                government_office="Department of Business Development (DBD)",
                notes=["Work permit requirements: 2 million THB capital per foreign employee (general rule)"],
            ),
            LegalScenario(
                scenario="Foreign-owned company (100% foreign ownership)",
                what_the_law_says=(
                    "Majority foreign-owned companies may require a Foreign Business License (FBL) "
                    "or qualify for BOI promotion."
                ),
                required_steps=[
                    "Verify business activity is not on prohibited list",
                    "Apply for Foreign Business License or BOI promotion",
                    "Register company with minimum capital (typically 2-3 million THB for FBL)",
                ],
                prohibitions=[
                    "Certain businesses are prohibited for foreigners (List 1 of FBA)",
                    "Restricted businesses require minimum Thai ownership or FBL (Lists 2-3)",
                ],
                notes=["BOI promotion offers 100% ownership and tax benefits"],
            ),
        ],
        restrictions=[
            "Nominee shareholder structures are illegal",
            "Certain businesses restricted or prohibited for foreigners",
            "At least 51% Thai ownership required for land ownership",
        ],
        official_resources=[
            "Department of Business Development (www.dbd.go.th)",
            "Board of Investment (www.boi.go.th)",
            "Revenue Department",
        ],
        penalties=[
            "Operating without proper license: fines and possible imprisonment",
            "Nominee structures: void transactions, criminal liability",
            "False declarations: fines up to 1 million THB",
        ],
        disclaimers=[
            "Foreign ownership restrictions are strictly enforced",
            "Professional legal and accounting advice essential",
            "This is information only, not legal advice",
        ],
    ),
    "foreign-business-restrictions": LegalTopic(
        domain=LegalDomain.business,
        topic="Foreign Business Act Restrictions",
        description=(
            "Thai Foreign Business Act categorizes business activities into three lists "
            "with different restriction levels."
        ),
        relevant_laws=["Foreign Business Act B.E. 2542 (1999)", "Ministerial Regulations under FBA"],
        key_points=[
            "List 1: absolutely prohibited for foreigners (e.g., newspapers, rice farming, land trading)",
            "List 2: restricted unless Cabinet approval",
            "List 3: restricted unless Foreign Business License obtained (e.g., retail, construction)",
            "Foreign means more than 49% foreign ownership or control",
            "Treaty of Amity (US-Thai) provides some exemptions",
        ],
        common_scenarios=[
            LegalScenario(
                scenario="Operating a retail business as foreigner",
                what_the_law_says=(
                    "Retail is on List 3. Foreign-majority ownership requires a Foreign Business License "
                    "or BOI promotion."
                ),
                required_steps=[
                    "Verify specific business activity classification",
                    "Apply for Foreign Business License or BOI promotion",
                    "Meet minimum capital requirements (3 million THB for FBL)",
                ],
                notes=["FBL approval is discretionary and can take 6-12 months"],
            ),
        ],
        restrictions=[
            "List 1 businesses: absolutely prohibited",
            "Lists 2-3: require license or Thai majority ownership",
            "Treaty of Amity only applies to US nationals",
        ],
        official_resources=["Department of Business Development", "Board of Investment", "Ministry of Commerce"],
        disclaimers=[
            "Business classification can be ambiguous; professional advice needed",
            "This is information only, not legal advice",
        ],
    ),
}
