from langchain.tools import tool

FUN_FACTS = {
    "eiffel tower": "The Eiffel Tower can be 15 cm taller during the summer due to thermal expansion of the iron.",
    "paris": "Paris was originally a Roman city called Lutetia.",
    "louvre museum": (
        "The Louvre Museum is so large that if you spent just 30 seconds looking at each piece of art, "
        "it would take you about 200 days to see everything."
    ),
    "statue of liberty": (
        "The Statue of Liberty's outer layer is made of copper, and it's only about as thick as "
        "two pennies put together (2.4mm)."
    ),
    "great wall of china": "The Great Wall of China is not a single continuous wall but a series of fortifications.",
}


def fun_fact_for(topic: str) -> str:
    """Return the curated fact for ``topic`` or a generic filler sentence. Never fails."""
    fact = FUN_FACTS.get(topic.lower())
    if fact:
        return fact
    return (
        f"One interesting (but perhaps not widely known) detail about {topic} "
        f"is its unique connection to local traditions and history."
    )


@tool
def get_fun_fact(topic: str) -> str:
    """Provide a fun fact about a specific topic, person, or place.

    Use this to add interesting details to your response when relevant to the user query.

    Input:
    - topic: The topic for which a fun fact is requested. Should be specific,
      e.g. "Eiffel Tower", "Paris", "Louvre Museum".
    """
    return fun_fact_for(topic)
