"""Property and real estate law topics."""
from navigator.models.legal import LegalDomain
from navigator.schemas.legal import LegalTopic, LegalScenario

_NOT_ADVICE = "This is information only, not legal advice"

PROPERTY_TOPICS: dict[str, LegalTopic] = {
    "condo-ownership": LegalTopic(
        domain=LegalDomain.property,
        topic="Condominium Ownership by Foreigners",
        description="Thai law allows foreigners to own condominium units under specific conditions and restrictions.",
        relevant_laws=[
            "Condominium Act B.E. 2522 (1979)",
            "Land Code Amendment Act",
            "Foreign Business Act B.E. 2542 (1999)",
        ],
        key_points=[
            "Foreigners can own condominium units (not land) in Thailand",
            "Foreign ownership in any condominium building is limited to 49% of total unit space",
            "Remaining 51% must be Thai-owned",
            "Funds must be brought from abroad with proper documentation (Foreign Exchange Transaction Form)",
            "Unit must be registered at Land Office in foreign name",
            "Foreign ownership quota is calculated per building, not per development",
        ],
        required_documents=[
            "Passport",
            "Foreign Exchange Transaction Form (FET) or proof of foreign currency transfer",
            "Sale and Purchase Agreement",
            "Condominium ownership transfer documents",
            "Proof of funds origin (bank statements, wire transfer confirmation)",
        ],
        official_resources=[
            "Land Department (www.dol.go.th)",
            "Bank of Thailand (for FET forms)",
            "Local Land Office for registration",
        ],
        common_scenarios=[
            LegalScenario(
                scenario="Purchasing a condo unit from developer",
                what_the_law_says=(
                    "Thai law requires funds for purchase to be transferred from abroad in foreign currency. "
                    "A Foreign Exchange Transaction Form (FET) must be obtained from the receiving bank as proof."
                ),
                required_steps=[
                    "Transfer funds from foreign bank account in foreign currency",
                    "Receive FET form from Thai bank",
                    "Complete sale agreement with developer",
                    "Register ownership at Land Office",
                    "Verify building's foreign ownership quota is not exceeded",
                ],
                typical_documents=["FET form", "Passport", "Sale agreement", "Building ownership documents"],
                government_office="Land Department Office",
                notes=[
                    "FET form is critical: without it, ownership may not be registered in foreign name",
                    "Building must have remaining foreign quota available",
                    "Registration must be completed within timeframe specified in sale agreement",
                ],
            ),
            LegalScenario(
                scenario="Inheriting a condo from Thai spouse",
                what_the_law_says=(
                    "Foreign heirs inheriting property from Thai nationals may face restrictions. "
                    "Thai law may require sale or transfer to comply with foreign ownership limits."
                ),
                prohibitions=[
                    "Foreigners cannot inherit land (only buildings/condos)",
                    "Inherited condo may need to be sold if building foreign quota exceeded",
                ],
                notes=[
                    "Estate and inheritance law is complex",
                    "Professional legal counsel strongly recommended",
                    "Tax implications for inheritance",
                ],
            ),
            LegalScenario(
                scenario="Verifying foreign quota before purchase",
                what_the_law_says=(
                    "Thai law requires condominium buildings to maintain no more than 49% foreign ownership. "
                    "Buyers should verify available quota before transfer."
                ),
                required_steps=[
                    "Request foreign quota certificate from condominium juristic person",
                    "Verify at Land Office that building has not exceeded 49% foreign ownership",
                    "Check that specific unit being purchased is not already counted in foreign quota",
                    "Ensure quota availability in writing before payment",
                ],
                typical_documents=[
                    "Foreign ownership quota certificate (from condo juristic person)",
                    "Building registration documents",
                    "List of foreign-owned units in building",
                ],
                government_office="Land Department Office, Condominium Juristic Person",
                notes=[
                    "Foreign quota is calculated per building, not per development",
                    "Quota can be exhausted even if building is not fully sold",
                    "If quota exhausted, unit must be registered in Thai name (lease arrangement possible)",
                    "Quota calculation uses total square meters, not number of units",
                ],
            ),
            LegalScenario(
                scenario="Property transfer fees and taxes",
                what_the_law_says=(
                    "Thai law requires payment of transfer fees and taxes when ownership changes: transfer fee 2% "
                    "of registered value; stamp duty 0.5% or specific business tax 3.3% (sale within 5 years); "
                    "withholding tax 0.5-10% progressive. Total typically 4-6% of property value."
                ),
                typical_documents=[
                    "Sale agreement showing agreed allocation of costs",
                    "Transfer fee payment receipts",
                    "Tax payment receipts (business tax or stamp duty)",
                    "Withholding tax payment receipt",
                ],
                notes=[
                    "Transfer fee is usually split 50/50 between buyer and seller (negotiable)",
                    "Business tax and stamp duty are alternatives; only one applies",
                    "Land Office will not register transfer until all fees and taxes are paid",
                ],
            ),
            LegalScenario(
                scenario="Joint ownership with Thai spouse",
                what_the_law_says=(
                    "Foreigners married to Thai nationals may buy property with their spouse, but land cannot be "
                    "owned by the foreigner. The Land Office requires a declaration that funds are the Thai "
                    "spouse's separate property."
                ),
                required_steps=[
                    "Obtain marriage certificate (translated and legalized if married abroad)",
                    "Sign declaration at Land Office that funds are Thai spouse's separate property",
                    "Complete transfer in Thai spouse's name (land) or joint names (condo, quota permitting)",
                ],
                required_documents=[
                    "Marriage certificate",
                    "Kor Ror 22 form (declaration of separate property)",
                    "Both spouses' passports/IDs",
                    "Proof of funds",
                ],
                government_office="Land Department Office",
                prohibitions=[
                    "Foreign spouse cannot be beneficial owner of land",
                    "Matrimonial property cannot be used to buy land in foreign name",
                ],
                notes=[
                    "If the marriage dissolves the foreign spouse may have limited claim despite funding the purchase",
                    "If the Thai spouse dies the foreign spouse may not inherit land (only buildings)",
                    "Consult a family law attorney before purchasing in the Thai spouse's name",
                ],
            ),
        ],
        restrictions=[
            "Cannot own land (only the condo unit)",
            "Cannot exceed 49% foreign ownership in building",
            "Cannot purchase with Thai-sourced funds and register in foreign name",
            "Cannot own property near borders or military installations",
        ],
        disclaimers=[
            "This is legal information only, not legal advice",
            "Property law is complex and fact-specific",
            "Consult a licensed Thai property lawyer before any transaction",
            "Laws and regulations are subject to change",
        ],
    ),
    "land-ownership": LegalTopic(
        domain=LegalDomain.property,
        topic="Land Ownership Restrictions for Foreigners",
        description="Thai law generally prohibits foreigners from owning land, with limited exceptions.",
        relevant_laws=[
            "Land Code B.E. 2497 (1954)",
            "Land Code Amendment",
            "Foreign Business Act B.E. 2542 (1999)",
        ],
        key_points=[
            "Foreigners generally cannot own land in Thailand",
            "Land can be leased for up to 30 years (renewable)",
            "Thai companies with majority Thai ownership can own land",
            "Foreign spouse of Thai national cannot own land (even through marriage)",
            "Exception: investment of 40 million THB or more under Board of Investment (BOI)",
            "Structures on land (buildings/houses) can be owned separately from land",
        ],
        restrictions=[
            "No direct land ownership by foreigners (with rare exceptions)",
            "Nominee structures (Thai person holding land for a foreigner) are illegal",
            "Cannot circumvent restrictions through marriage",
            "Leases exceeding 30 years are void",
        ],
        common_scenarios=[
            LegalScenario(
                scenario="Long-term lease of land",
                what_the_law_says=(
                    "Thai law allows land to be leased to foreigners for up to 30 years. "
                    "The lease must be registered at the Land Office to be enforceable."
                ),
                required_steps=[
                    "Negotiate lease agreement with Thai landowner",
                    "Register lease at Land Department Office",
                    "Pay registration fee (approximately 1% of total lease value)",
                    "Ensure lease terms do not exceed 30 years",
                ],
                typical_documents=["Passport", "Lease agreement", "Land title deed (Chanote)", "Landowner's ID"],
                government_office="Land Department Office",
                notes=[
                    "Verbal agreements are not enforceable for land leases",
                    "Renewal clauses for additional 30-year terms are legally uncertain",
                ],
            ),
            LegalScenario(
                scenario="Buying land through Thai company",
                what_the_law_says=(
                    "A Thai company with at least 51% Thai ownership can own land. Using Thai nominees to "
                    "circumvent foreign ownership restrictions is illegal under Thai law."
                ),
                prohibitions=[
                    "Nominee structures are illegal and void",
                    "Authorities can investigate and void transactions",
                    "Criminal penalties may apply for nominee arrangements",
                ],
                notes=[
                    "Legitimate Thai companies with genuine Thai shareholders can own land",
                    "Legal advice essential before pursuing this structure",
                ],
            ),
        ],
        official_resources=[
            "Land Department (www.dol.go.th)",
            "Ministry of Interior",
            "Board of Investment (for BOI exceptions)",
        ],
        penalties=[
            "Void transactions if nominee structure discovered",
            "Possible criminal prosecution for fraudulent land acquisition",
            "Forced sale of illegally held land",
        ],
        disclaimers=[
            "Land law in Thailand is strict and heavily enforced",
            "Professional legal counsel is essential for any land-related transaction",
            _NOT_ADVICE,
        ],
    ),
    "rental-lease": LegalTopic(
        domain=LegalDomain.property,
        topic="Rental and Lease Agreements (Residential)",
        description="Thai law governs rental and lease agreements for residential properties.",
        relevant_laws=[
            "Civil and Commercial Code - Book III (Property)",
            "Lease of Immovable Property Act",
        ],
        key_points=[
            "Leases under 3 years: oral agreement valid but written recommended",
            "Leases 3+ years: must be in writing and registered at Land Office",
            "Residential rental: typically 1-year contracts",
            "Deposit typically 1-2 months rent (returned unless damage)",
            "30-day notice typically required for termination",
        ],
        common_scenarios=[
            LegalScenario(
                scenario="Renting a condominium (residential)",
                what_the_law_says=(
                    "Thai law allows oral or written lease agreements for terms under 3 years. "
                    "Written agreements are enforceable without registration."
                ),
                required_steps=[
                    "Negotiate rent and terms with landlord",
                    "Sign lease agreement (typically 1 year)",
                    "Pay deposit (1-2 months) and first month rent",
                    "Conduct property inspection and document condition",
                ],
                typical_documents=["Lease agreement", "Passport copy", "Deposit receipt", "Property condition checklist"],
                notes=[
                    "Ensure lease is in both Thai and English",
                    "Clarify utility payment responsibilities",
                ],
            ),
            LegalScenario(
                scenario="Early termination of lease",
                what_the_law_says=(
                    "Thai law does not automatically allow early termination. Early termination terms must be "
                    "specified in the lease; without such a clause the tenant may be liable for remaining rent."
                ),
                prohibitions=[
                    "Cannot terminate without agreement unless landlord breaches contract",
                    "Cannot withhold rent without legal justification",
                ],
                notes=["Typical clause: 1-2 months notice plus forfeit of deposit"],
            ),
            LegalScenario(
                scenario="Deposit return disputes",
                what_the_law_says=(
                    "Thai law requires the landlord to return the deposit unless there are legitimate deductions "
                    "for damage beyond normal wear and tear, supported by evidence."
                ),
                notes=[
                    "Normal wear and tear is landlord's responsibility",
                    "Burden of proof for damage is on landlord",
                    "Disputes can be resolved through mediation or Small Claims Court",
                ],
            ),
        ],
        restrictions=[
            "Leases over 30 years are void",
            "Certain lease terms may be unenforceable if against public policy",
        ],
        official_resources=[
            "Consumer Protection Board",
            "Small Claims Court (for deposit disputes)",
            "Land Department (for lease registration)",
        ],
        disclaimers=[
            "Individual lease terms supersede general law in many cases",
            _NOT_ADVICE,
        ],
    ),
    "commercial-lease": LegalTopic(
        domain=LegalDomain.property,
        topic="Commercial Property Leases",
        description=(
            "Thai law governs commercial leases differently from residential, "
            "with longer terms and different protections."
        ),
        relevant_laws=[
            "Civil and Commercial Code - Book III (Property)",
            "Lease of Immovable Property Act",
        ],
        key_points=[
            "Commercial leases typically 3-30 years",
            "Must be registered at Land Office if 3+ years",
            "Less tenant protection than residential leases",
            "Substantial deposits typical (3-6 months rent)",
            "Landlord may require personal guarantee",
        ],
        common_scenarios=[
            LegalScenario(
                scenario="Leasing commercial space for restaurant/retail",
                what_the_law_says=(
                    "Commercial leases may run up to 30 years and must be registered if 3+ years. "
                    "They carry fewer statutory protections, so contract terms are critical."
                ),
                required_steps=[
                    "Negotiate lease term (typically 3, 5, or 10 years)",
                    "Agree on rent escalation (typically 5-10% every 3 years)",
                    "Register lease at Land Office (if 3+ years)",
                ],
                typical_documents=[
                    "Commercial lease agreement",
                    "Company registration documents",
                    "Personal guarantee (from director/owner)",
                ],
                government_office="Land Department Office",
                notes=["Early termination often requires paying all remaining rent"],
            ),
            LegalScenario(
                scenario="Commercial lease renewal or extension",
                what_the_law_says=(
                    "Thai law limits leases to 30 years. Renewal clauses beyond the initial term are legally "
                    "uncertain and courts may not enforce automatic renewal."
                ),
                required_steps=[
                    "Review original lease for renewal clauses",
                    "Negotiate new terms with landlord",
                    "Re-register at Land Office (if 3+ years)",
                ],
                notes=["Renewal is not guaranteed even if the contract states 'renewable'"],
            ),
        ],
        restrictions=[
            "Maximum 30-year lease term",
            "Automatic renewal clauses may not be enforceable",
        ],
        official_resources=[
            "Land Department (www.dol.go.th)",
            "Department of Business Development (for business licenses)",
        ],
        disclaimers=[
            "Contract terms are critical; legal review essential before signing",
            _NOT_ADVICE,
        ],
    ),
    "usufruct-vs-lease": LegalTopic(
        domain=LegalDomain.property,
        topic="Usufruct vs Lease vs Ownership Rights",
        description="Thai law offers different property rights structures with varying durations and protections.",
        relevant_laws=[
            "Civil and Commercial Code - Sections 1417-1428 (Usufruct)",
            "Civil and Commercial Code - Book III (Lease)",
            "Land Code B.E. 2497 (1954)",
        ],
        key_points=[
            "Ownership: foreigners cannot own land (condos only)",
            "Lease: maximum 30 years, registered at Land Office",
            "Usufruct: lifetime right to use property (or max 30 years)",
            "Superficies: right to own buildings on someone else's land",
            "Habitation: personal right to live in property (non-transferable)",
        ],
        common_scenarios=[
            LegalScenario(
                scenario="Usufruct vs Lease for foreigner married to Thai spouse",
                what_the_law_says=(
                    "Usufruct can be granted for the holder's lifetime or up to 30 years; a lease is limited "
                    "to 30 years. Both must be registered."
                ),
                required_steps=[
                    "Decide between lease (30 years) or usufruct (lifetime or 30 years)",
                    "Register right at Land Office",
                ],
                typical_documents=[
                    "Usufruct agreement or lease agreement",
                    "Land title deed (Chanote)",
                    "Thai spouse's consent",
                ],
                government_office="Land Department Office",
                notes=[
                    "Usufruct ends upon death and cannot pass to heirs",
                    "A lease can be inherited or sold if the contract allows",
                ],
            ),
            LegalScenario(
                scenario="Superficies right for building on leased land",
                what_the_law_says=(
                    "Superficies separates ownership of buildings from ownership of land, so foreigners can own "
                    "buildings on land owned by a Thai national."
                ),
                required_steps=[
                    "Lease land or obtain usufruct",
                    "Obtain and register superficies right",
                    "Register building ownership separately",
                ],
                notes=["At the end of the superficies the building may revert to the landowner"],
            ),
        ],
        restrictions=[
            "Usufruct cannot exceed lifetime or 30 years",
            "Usufruct cannot be sold or transferred",
            "Lease maximum 30 years per term",
        ],
        official_resources=["Land Department (www.dol.go.th)", "Local Land Office for registration"],
        penalties=[
            "Unregistered usufruct/lease not enforceable",
            "Verbal agreements void for land rights",
        ],
        disclaimers=[
            "Divorce, death, and inheritance significantly affect rights",
            _NOT_ADVICE,
        ],
    ),
    "condo-common-fees": LegalTopic(
        domain=LegalDomain.property,
        topic="Condominium Common Fees and Disputes",
        description=(
            "Thai condominium law establishes a juristic person to manage common areas, "
            "collect fees, and resolve disputes."
        ),
        relevant_laws=["Condominium Act B.E. 2522 (1979)", "Civil and Commercial Code"],
        key_points=[
            "All condominiums must have a juristic person (management entity)",
            "Common fees are mandatory for all unit owners",
            "Unit owners can be sued for unpaid common fees",
        ],
        common_scenarios=[
            LegalScenario(
                scenario="Understanding common fee obligations",
                what_the_law_says=(
                    "All unit owners must pay common area maintenance fees to the juristic person. "
                    "Fees are set by majority vote of co-owners."
                ),
                required_steps=[
                    "Understand fee structure (monthly rate per sqm)",
                    "Pay fees on time to avoid penalties",
                ],
                notes=["Common fees typically 30-70 THB per sqm per month"],
            ),
            LegalScenario(
                scenario="Disputes with juristic person or co-owners",
                what_the_law_says=(
                    "The juristic person enforces condominium rules and manages common areas. Disputes go through "
                    "the internal process, mediation, or courts."
                ),
                required_steps=[
                    "Review condominium rules and bylaws",
                    "Raise issue with juristic person committee",
                    "If unresolved: mediation or court",
                ],
            ),
        ],
        restrictions=[
            "Cannot refuse to pay common fees (even if dispute with juristic person)",
            "Cannot modify common areas without juristic person approval",
        ],
        official_resources=[
            "Condominium Juristic Person Office",
            "Land Department (for condominium registration issues)",
            "Consumer Protection Board (for disputes)",
        ],
        penalties=[
            "Late fees for unpaid common fees (typically 1.5% per month)",
            "Cannot sell unit with outstanding common fee debt",
        ],
        disclaimers=[
            "Individual condominium rules may be more restrictive than general law",
            _NOT_ADVICE,
        ],
    ),
}
