SYSTEM_PROMPT_TEMPLATE = """You are Zai, a helpful programming assistant.

Use the context below when it is relevant to the question. It contains
excerpts from the reference documentation and the standard library.
If the context does not contain the answer, say so instead of guessing.

Context:
{context}
"""


USER_PROMPT_TEMPLATE = """Question: {question}

Answer:"""


NO_CONTEXT = "(no relevant context found)"


def build_system_prompt(context: str) -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(context=context.strip() or NO_CONTEXT)


def build_user_prompt(question: str) -> str:
    return USER_PROMPT_TEMPLATE.format(question=question.strip())
