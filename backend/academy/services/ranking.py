RANK_TIERS = (
    (2000, 'Elite Hacker'),
    (1500, 'Advanced Hacker'),
    (1000, 'Intermediate Hacker'),
    (500, 'Novice Hacker'),
    (200, 'Script Kiddie'),
)
LOWEST_RANK = 'Noob'


def classify_rank(score) -> str:
    """Map a score to its rank label. Lower bounds are inclusive."""
    for threshold, label in RANK_TIERS:
        if score >= threshold:
            return label
    return LOWEST_RANK
