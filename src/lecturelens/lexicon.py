"""Keyword tables used by the transcript scorers.

Each scorer has its own table. The importance weights and the density
keywords overlap but are tuned separately: "crucial" and "significant" only
flag sentences, while "note" and "fundamental" only raise segment density.
"""

# Term or phrase -> weight. Matched case-insensitively on word boundaries.
IMPORTANCE_WEIGHTS: dict[str, float] = {
    "important": 3,
    "definition": 3,
    "formula": 3,
    "exam": 4,
    "note this": 3,
    "remember": 2,
    "key": 2.5,
    "must know": 4,
    "critical": 3.5,
    "essential": 2.5,
    "fundamentally": 2,
    "crucial": 3.5,
    "significant": 2.5,
    "relevant": 1.5,
}

# A sentence scoring at or above this is flagged as important
IMPORTANCE_THRESHOLD = 2.5

# Unweighted: every whole-word hit counts 1
DENSITY_KEYWORDS: tuple[str, ...] = (
    "important",
    "definition",
    "formula",
    "exam",
    "remember",
    "note",
    "key",
    "critical",
    "essential",
    "fundamental",
)

# Plain substring match, so "remembering" and "examples" also hit
EXAM_SIGNALS: tuple[str, ...] = (
    "exam",
    "remember",
    "important",
    "must know",
    "critical",
    "definition",
    "formula",
)

STOP_WORDS = frozenset({
    "the", "a", "an", "is", "are", "was", "were", "be", "been", "being",
    "to", "of", "and", "in", "for", "on", "with", "at", "by", "from",
    "this", "that", "it", "as", "or", "we", "our", "its", "will", "can",
})
