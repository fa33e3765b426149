# app/utils/prompt_builder.py

NOT_SPECIFIED = "Not specified"

SYSTEM_PROMPT = (
    "You are a creative educational content writer who specializes in creating "
    "engaging, age-appropriate newsletters for children. Your content should be "
    "fun, educational, and inspire curiosity."
)


def _or_placeholder(value) -> str:
    if value is None:
        return NOT_SPECIFIED
    value = str(value).strip()
    return value or NOT_SPECIFIED


def build_newsletter_prompt(child) -> str:
    """
    Monta o prompt do usuário a partir do perfil da criança.
    Campos opcionais ausentes viram "Not specified"; os interesses saem
    na ordem em que foram cadastrados, separados por ", ".
    """
    interests = ", ".join(child.interests or []) or NOT_SPECIFIED

    return (
        f"Create a fun, educational newsletter for {child.name}, age {child.age}.\n"
        "\n"
        f"Child's interests: {interests}\n"
        f"Favorite shows: {_or_placeholder(child.favorite_shows)}\n"
        f"Hobbies: {_or_placeholder(child.hobbies)}\n"
        f"Grade: {_or_placeholder(child.grade)}\n"
        "\n"
        "Create content that includes:\n"
        "1. A fun science fact related to their interests\n"
        "2. A math puzzle or brain teaser appropriate for their age\n"
        "3. A short story or fun fact about one of their interests\n"
        "4. A creative activity they can do at home\n"
        '5. A "Did You Know?" section with an amazing fact\n'
        "\n"
        "Format this as a structured newsletter with clear sections. Keep the language "
        "age-appropriate and engaging. Make it printable-friendly with simple formatting."
    )
