"""Edit distance alignment algorithm for sequence matching."""
from __future__ import annotations

import logging
from typing import List, Sequence

from pron_core.errors import PreconditionViolation
from pron_core.models.alignment_step import AlignmentStep, ErrorType

from .normalizer import normalize_token

logger = logging.getLogger(__name__)

# Longest sequence aligned; the cost table grows with len(ref) * len(hyp)
MAX_ALIGNMENT_TOKENS = 2000


def _cost_table(ref: Sequence[str], hyp: Sequence[str]) -> List[List[int]]:
    n, m = len(ref), len(hyp)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        dp[i][0] = i
    for j in range(m + 1):
        dp[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost_sub = 0 if ref[i - 1] == hyp[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j - 1] + cost_sub,  # match / substitution
                dp[i - 1][j] + 1,             # deletion
                dp[i][j - 1] + 1,             # insertion
            )
    return dp


def align(
    reference: Sequence[str],
    hypothesis: Sequence[str],
    max_tokens: int = MAX_ALIGNMENT_TOKENS,
) -> List[AlignmentStep]:
    """Classic edit-distance alignment returning a path of operations.

    Unit cost for substitution, insertion and deletion; equal tokens (compared
    case-insensitively, whitespace-trimmed) cost nothing. When several optimal
    alignments exist the backtrace prefers the diagonal move, then deletion,
    then insertion, so the reported path is deterministic.

      MATCH -> correct words
      SUBSTITUTION -> wrong word in place of a reference word
      DELETION -> missed reference words
      INSERTION -> extra spoken words

    Args:
        reference: Reference sequence (list of tokens)
        hypothesis: Hypothesis sequence (list of tokens from ASR)
        max_tokens: Longest sequence accepted on either side

    Returns:
        Steps in left-to-right order. Every reference index appears in
        exactly one step, and likewise every hypothesis index.

    Raises:
        PreconditionViolation: If either sequence is None or longer than
            max_tokens
    """
    if reference is None or hypothesis is None:
        raise PreconditionViolation("alignment sequences must not be None")
    if len(reference) > max_tokens or len(hypothesis) > max_tokens:
        raise PreconditionViolation(
            f"cannot align {len(reference)} reference / {len(hypothesis)} hypothesis tokens, "
            f"limit is {max_tokens}"
        )

    ref = [normalize_token(t) for t in reference]
    hyp = [normalize_token(t) for t in hypothesis]
    dp = _cost_table(ref, hyp)

    # backtrack
    steps: List[AlignmentStep] = []
    i, j = len(ref), len(hyp)
    while i > 0 or j > 0:
        if i > 0 and j > 0:
            same = ref[i - 1] == hyp[j - 1]
            if dp[i][j] == dp[i - 1][j - 1] + (0 if same else 1):
                op = ErrorType.MATCH if same else ErrorType.SUBSTITUTION
                steps.append(AlignmentStep(op, i - 1, j - 1))
                i -= 1
                j -= 1
                continue
        if i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            steps.append(AlignmentStep(ErrorType.DELETION, i - 1, None))
            i -= 1
        else:
            steps.append(AlignmentStep(ErrorType.INSERTION, None, j - 1))
            j -= 1
    steps.reverse()

    logger.debug("aligned %d reference / %d hypothesis tokens, edit cost %d",
                 len(ref), len(hyp), dp[len(ref)][len(hyp)])
    return steps


def edit_cost(steps: Sequence[AlignmentStep]) -> int:
    """Number of non-MATCH steps in an alignment."""
    return sum(1 for step in steps if step.op is not ErrorType.MATCH)
