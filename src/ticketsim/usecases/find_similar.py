"""Find similar tickets use-case."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from ticketsim.config import SimilaritySettings
from ticketsim.domain.models import (
    CandidateQuery,
    DraftTicket,
    FeatureVector,
    ScoredCandidate,
    SimilarityExplanation,
    SimilarityResult,
)
from ticketsim.domain.ports import CandidateSourcePort, SimilarityScorerPort
from ticketsim.infra.features import build_features
from ticketsim.infra.ranking import rank_results
from ticketsim.infra.scoring import WeightedJaccardScorer, explain_score
from ticketsim.infra.shaping import shape_result
from ticketsim.tickets import TicketRecord

logger = logging.getLogger(__name__)


def find_similar_tickets(
    source: CandidateSourcePort,
    draft: DraftTicket,
    *,
    settings: Optional[SimilaritySettings] = None,
    scorer: Optional[SimilarityScorerPort] = None,
    now: Optional[datetime] = None,
) -> List[SimilarityResult]:
    """Return up to ``top_results`` recent open tickets that read like the draft.

    Each candidate is scored, shaped (which rounds the score) and only then
    thresholded, so the cut-off applies to the rounded relevance score.
    """
    settings = settings or SimilaritySettings()
    scorer = scorer or _default_scorer(settings)
    pool = _score_pool(source, draft, settings, scorer, now)
    if not pool:
        return []
    shaped = [shape_result(scored, snippet_length=settings.snippet_length) for scored in pool]
    results = rank_results(
        shaped,
        min_score=settings.min_relevance_score,
        top_k=settings.top_results,
    )
    logger.debug("Returning %d of %d scored candidates", len(results), len(pool))
    return results


def explain_similar_tickets(
    source: CandidateSourcePort,
    draft: DraftTicket,
    *,
    settings: Optional[SimilaritySettings] = None,
    scorer: Optional[SimilarityScorerPort] = None,
    now: Optional[datetime] = None,
) -> List[SimilarityExplanation]:
    """Same ranking as :func:`find_similar_tickets`, with a per-field score breakdown.

    Pass the same ``scorer`` as to :func:`find_similar_tickets` to get the
    same results; scorers without an ``explain`` method still get a breakdown
    of the per-field token overlap.
    """
    settings = settings or SimilaritySettings()
    scorer = scorer or _default_scorer(settings)
    candidates, draft_features = _shortlist(source, draft, settings, now)
    if draft_features is None:
        return []

    explained: List[SimilarityExplanation] = []
    for candidate in candidates:
        breakdown = explain_score(scorer, draft_features, _candidate_features(candidate, settings))
        result = shape_result(
            ScoredCandidate(record=candidate, score=breakdown.score),
            snippet_length=settings.snippet_length,
        )
        explained.append(SimilarityExplanation(result=result, breakdown=breakdown))

    return rank_results(
        explained,
        min_score=settings.min_relevance_score,
        top_k=settings.top_results,
        key=lambda item: item.result.relevance_score,
    )


def _default_scorer(settings: SimilaritySettings) -> WeightedJaccardScorer:
    return WeightedJaccardScorer(
        subject_weight=settings.subject_weight,
        description_weight=settings.description_weight,
    )


def _score_pool(
    source: CandidateSourcePort,
    draft: DraftTicket,
    settings: SimilaritySettings,
    scorer: SimilarityScorerPort,
    now: Optional[datetime],
) -> List[ScoredCandidate]:
    candidates, draft_features = _shortlist(source, draft, settings, now)
    if draft_features is None:
        return []
    return [
        ScoredCandidate(
            record=candidate,
            score=scorer.score(draft_features, _candidate_features(candidate, settings)),
        )
        for candidate in candidates
    ]


def _shortlist(
    source: CandidateSourcePort,
    draft: DraftTicket,
    settings: SimilaritySettings,
    now: Optional[datetime],
) -> Tuple[List[TicketRecord], Optional[FeatureVector]]:
    query = CandidateQuery(
        recency_days=settings.recency_days,
        excluded_statuses=frozenset(settings.excluded_statuses),
        max_candidates=settings.max_candidates,
        now=_aware(now or datetime.now(timezone.utc)),
        category=draft.category if settings.require_category_match else None,
    )
    candidates = source.fetch_candidates(query)
    if not candidates:
        logger.debug("No candidates since %s; skipping scoring", query.cutoff.isoformat())
        return [], None

    draft_features = build_features(
        draft.subject,
        draft.description,
        min_token_length=settings.min_token_length,
    )
    if draft_features.is_empty:
        logger.debug("Draft has no meaningful tokens; skipping scoring")
        return [], None
    logger.debug("Scoring %d candidates", len(candidates))
    return candidates, draft_features


def _candidate_features(candidate: TicketRecord, settings: SimilaritySettings) -> FeatureVector:
    return build_features(
        candidate.subject,
        candidate.description,
        min_token_length=settings.min_token_length,
    )


def _aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
