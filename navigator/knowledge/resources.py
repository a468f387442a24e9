"""Directory of offices and organisations that handle legal matters."""
from navigator.models.legal import ResourceCategory
from navigator.schemas.legal import LegalResource, LegalResourceDirectory

LEGAL_RESOURCES: tuple[LegalResourceDirectory, ...] = (
    LegalResourceDirectory(
        category=ResourceCategory.government_offices,
        resources=[
            LegalResource(
                name="Land Department",
                type="Government Office",
                specialty=["Property registration", "Land ownership", "Leases"],
                website="www.dol.go.th",
                notes=["Handles all property registration", "Branch offices in every province"],
            ),
            LegalResource(
                name="Department of Business Development (DBD)",
                type="Government Office",
                specialty=["Company registration", "Business licenses"],
                website="www.dbd.go.th",
                notes=["Company registration", "Foreign Business Licenses"],
            ),
            LegalResource(
                name="Board of Investment (BOI)",
                type="Government Office",
                specialty=["Investment promotion", "BOI privileges"],
                website="www.boi.go.th",
                notes=["Offers tax and non-tax benefits for qualifying businesses"],
            ),
            LegalResource(
                name="Department of Labor Protection and Welfare",
                type="Government Office",
                specialty=["Labor law", "Employment disputes"],
                website="www.labour.go.th",
                notes=["Enforces labor protection laws", "Handles complaints"],
            ),
            LegalResource(
                name="Labor Court",
                type="Court",
                specialty=["Employment disputes", "Unfair dismissal", "Severance claims"],
                notes=["Can order reinstatement or compensation"],
            ),
        ],
    ),
    LegalResourceDirectory(
        category=ResourceCategory.embassies,
        resources=[
            LegalResource(
                name="Embassy Contact for Nationals",
                type="Embassy/Consulate",
                notes=[
                    "Can provide list of local lawyers",
                    "Cannot provide legal advice",
                    "Can assist with legal emergencies (arrest, detention)",
                ],
            ),
        ],
    ),
    LegalResourceDirectory(
        category=ResourceCategory.lawyers,
        resources=[
            LegalResource(
                name="Thai Bar Association",
                type="Professional Association",
                website="www.lawyerscouncil.or.th",
                notes=["Can provide referrals to licensed lawyers", "Verify lawyer credentials"],
            ),
        ],
    ),
    LegalResourceDirectory(
        category=ResourceCategory.legal_aid,
        resources=[
            LegalResource(
                name="Legal Aid Office (Department of Rights and Liberties Protection)",
                type="Government Legal Aid",
                notes=["Free legal assistance for qualifying individuals", "Income requirements apply"],
            ),
        ],
    ),
)
