"""
Purpose: The AI-assist transformation pipeline.
Stages, strictly ordered: translate -> correct -> classify danger.
Each stage may leave a note in the transcript; the outcome tells the caller
whether execution must wait for an explicit yes/no.
"""

from __future__ import annotations
import logging

from ..models import EntryKind, PipelineOutcome
from ..persistence.transcript import Transcript
from ..texts import notes
from . import corrector, safety, translator

logger = logging.getLogger(__name__)


def run(statement: str, transcript: Transcript) -> PipelineOutcome:
    sql = statement

    converted = translator.translate(sql)
    if converted:
        logger.debug("translated %r -> %r", statement, converted)
        sql = converted
        transcript.append(EntryKind.AI, notes.translated(converted))

    fixed, corrections = corrector.fix_typos(sql)
    if corrections:
        logger.debug("corrected %r -> %r (%d fixes)", sql, fixed, len(corrections))
        sql = fixed
        transcript.append(EntryKind.AI, notes.corrected(corrections, fixed))

    outcome = PipelineOutcome(
        statement=sql, translated=bool(converted), corrections=corrections
    )

    danger = safety.classify(sql)
    if danger:
        logger.warning("destructive statement (%s): %r", danger.severity.value, sql)
        transcript.append(EntryKind.WARNING, danger.warning)
        outcome.danger = danger
        outcome.warning_shown = True
        if safety.requires_confirmation(danger):
            outcome.must_confirm = True
            transcript.append(EntryKind.WARNING, notes.confirm_prompt())

    return outcome
