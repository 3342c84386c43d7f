DEFAULT_SUPPORT_EMAIL = "support@mrsac-isms.in"


def matched_answer(category: str, answer: str) -> str:
    return f"[{category}] {answer}"


def fallback_message(support_email: str = DEFAULT_SUPPORT_EMAIL) -> str:
    # the chat widget shows this text verbatim; keep the typographic apostrophe
    return f"I'm sorry, I couldn’t find an answer to that. Please contact {support_email} for help."
