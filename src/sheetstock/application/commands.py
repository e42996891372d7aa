"""Application commands (use cases) for cutting sheet stock."""

from __future__ import annotations

import logging

from sheetstock.domain import (
    AllocationCommitter,
    AllocationError,
    CutRequest,
    CutValidator,
    MaterialKind,
    SourceResolver,
)

from .dtos import BatchCheckOutput, CommitInput, CommitOutput

logger = logging.getLogger(__name__)


class CommitCutsCommand:
    """Command to commit a cut batch against a source.

    Domain failures come back as a typed ``Rejection`` on the output rather
    than as exceptions, so callers can show them and let the user retry.
    """

    def __init__(self, committer: AllocationCommitter) -> None:
        self.committer = committer

    def execute(self, commit_input: CommitInput) -> CommitOutput:
        """Execute the commit.

        Args:
            commit_input: Source, cuts and leftover policy.

        Returns:
            CommitOutput with either the commit result or the rejection.
        """
        try:
            result = self.committer.commit(
                commit_input.source_kind,
                commit_input.source_id,
                commit_input.cuts,
                policy=commit_input.policy,
                remnant=commit_input.remnant,
            )
        except AllocationError as e:
            logger.warning(
                f"Commit rejected for {MaterialKind(commit_input.source_kind).value} "
                f"{commit_input.source_id!r}: {e.reason.value}: {e.message}"
            )
            return CommitOutput(rejection=e.to_rejection())

        return CommitOutput(result=result)


class CheckCutsCommand:
    """Command to validate a batch of cuts against a source without writing."""

    def __init__(
        self, resolver: SourceResolver, validator: CutValidator | None = None
    ) -> None:
        self.resolver = resolver
        self.validator = validator or CutValidator()

    def execute(
        self, source_kind: MaterialKind | str, source_id: str, cuts: list[CutRequest]
    ) -> BatchCheckOutput:
        """Check every cut independently and report all rejections.

        A source that does not resolve yields a single NOT_FOUND rejection.
        """
        output = BatchCheckOutput()
        try:
            source = self.resolver.resolve(source_kind, source_id)
        except AllocationError as e:
            output.rejections.append(e.to_rejection())
            return output

        for index, cut in enumerate(cuts):
            rejection = self.validator.validate(source, cut, cut_index=index)
            if rejection is None:
                output.accepted.append(cut)
            else:
                output.rejections.append(rejection)
        return output
