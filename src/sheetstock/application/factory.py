"""Service factory for dependency injection."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from sheetstock.domain.identity import new_id, utc_now
from sheetstock.domain.value_objects import RemnantPolicy

if TYPE_CHECKING:
    from sheetstock.application.commands import CheckCutsCommand, CommitCutsCommand
    from sheetstock.application.config import SheetstockConfiguration
    from sheetstock.application.inventory_service import InventoryService
    from sheetstock.contracts import InventoryStore
    from sheetstock.domain.services import (
        AllocationCommitter,
        CutValidator,
        InventorySummarizer,
        RemnantCalculator,
        SourceResolver,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances around one inventory store.

    Services are created lazily and cached, so every caller shares the same
    committer (and therefore the same per-source locks).

    Example:
        ```python
        factory = ServiceFactory(store=InMemoryInventoryStore())
        output = factory.create_commit_command().execute(commit_input)
        ```
    """

    store: "InventoryStore"
    id_factory: Callable[[], str] = new_id
    clock: Callable[[], datetime] = utc_now
    default_policy: RemnantPolicy = RemnantPolicy.FULL_FOOTPRINT

    _resolver: "SourceResolver | None" = field(default=None, init=False, repr=False)
    _validator: "CutValidator | None" = field(default=None, init=False, repr=False)
    _calculator: "RemnantCalculator | None" = field(default=None, init=False, repr=False)
    _committer: "AllocationCommitter | None" = field(default=None, init=False, repr=False)
    _inventory_service: "InventoryService | None" = field(
        default=None, init=False, repr=False
    )

    @classmethod
    def from_config(cls, config: "SheetstockConfiguration") -> "ServiceFactory":
        """Build a factory backed by the JSON store named in the configuration."""
        from sheetstock.infrastructure import JsonFileInventoryStore

        return cls(
            store=JsonFileInventoryStore(config.store.path),
            default_policy=config.cutting.default_policy,
        )

    def get_source_resolver(self) -> "SourceResolver":
        """Get or create source resolver instance."""
        if self._resolver is None:
            from sheetstock.domain.services import SourceResolver

            self._resolver = SourceResolver(self.store)
        return self._resolver

    def get_cut_validator(self) -> "CutValidator":
        if self._validator is None:
            from sheetstock.domain.services import CutValidator

            self._validator = CutValidator()
        return self._validator

    def get_remnant_calculator(self) -> "RemnantCalculator":
        if self._calculator is None:
            from sheetstock.domain.services import RemnantCalculator

            self._calculator = RemnantCalculator(self.id_factory, self.clock)
        return self._calculator

    def get_allocation_committer(self) -> "AllocationCommitter":
        """Get or create the committer shared by every commit command."""
        if self._committer is None:
            from sheetstock.domain.services import AllocationCommitter

            self._committer = AllocationCommitter(
                self.store,
                resolver=self.get_source_resolver(),
                validator=self.get_cut_validator(),
                calculator=self.get_remnant_calculator(),
                id_factory=self.id_factory,
                clock=self.clock,
            )
        return self._committer

    def get_inventory_service(self) -> "InventoryService":
        if self._inventory_service is None:
            from sheetstock.application.inventory_service import InventoryService

            self._inventory_service = InventoryService(
                self.store, self.id_factory, self.clock
            )
        return self._inventory_service

    def get_summarizer(self) -> "InventorySummarizer":
        from sheetstock.domain.services import InventorySummarizer

        return InventorySummarizer(self.store)

    def create_commit_command(self) -> "CommitCutsCommand":
        """Create a CommitCutsCommand wired to the shared committer."""
        from sheetstock.application.commands import CommitCutsCommand

        return CommitCutsCommand(self.get_allocation_committer())

    def create_check_command(self) -> "CheckCutsCommand":
        from sheetstock.application.commands import CheckCutsCommand

        return CheckCutsCommand(self.get_source_resolver(), self.get_cut_validator())


def get_factory(config: "SheetstockConfiguration | None" = None) -> ServiceFactory:
    """Create a factory from a configuration (defaults when ``None``)."""
    if config is None:
        from sheetstock.application.config import SheetstockConfiguration

        config = SheetstockConfiguration()
    return ServiceFactory.from_config(config)
