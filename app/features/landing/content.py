HEADLINE = "MASTER THE ART OF"
HEADLINE_EMPHASIS = "FINANCIAL FREEDOM"

INTRO = (
    "Transform your financial future with our comprehensive guide to personal finance, "
    "investment strategies, and wealth building. Learn the secrets that financial experts "
    "use to create lasting prosperity and security."
)

BENEFITS = [
    "Smart investment strategies for beginners and experts",
    "Proven methods to eliminate debt and build wealth",
    "Advanced techniques for passive income generation",
]
