EXPENSE_CATEGORIES = [
    "Food",
    "Transport",
    "Shopping",
    "Bills",
    "Entertainment",
    "Health",
    "Education",
    "Travel",
    "Other",
]

INCOME_CATEGORIES = [
    "Salary",
    "Freelance",
    "Investments",
    "Gift",
    "Refund",
    "Other",
]

DEFAULT_CATEGORY = "Other"

CATEGORIZE_PROMPT = """\
You are a financial assistant. Categorize {kind} entries into exactly one of \
these categories: {categories}.
Return only the category name, nothing else. Descriptions may be in English or \
Portuguese.
"""

INSIGHT_PROMPT = """\
You are a financial advisor. Provide brief, actionable insights about spending \
patterns. Keep it under 100 words. Answer in {language_name}.
"""

LANGUAGE_NAMES = {"en": "English", "pt": "Brazilian Portuguese"}
