"""Sentence-aware truncation of long text fields."""

SENTENCE_ENDINGS = ".!?"


def summarize(text: str | None, max_length: int) -> str | None:
    """Trim text to at most ``max_length`` characters.

    Cuts after the last sentence ending (``.``, ``!`` or ``?``) that fits
    within the limit; hard-truncates when no sentence ending fits.

    Examples:
        summarize("One. Two. Three.", 10) -> "One. Two."
        summarize("no punctuation here", 5) -> "no pu"
    """
    if not text or len(text) <= max_length:
        return text

    window = text[:max_length]
    cut = max(window.rfind(mark) for mark in SENTENCE_ENDINGS)
    if cut < 0:
        return window
    return window[: cut + 1].strip()
