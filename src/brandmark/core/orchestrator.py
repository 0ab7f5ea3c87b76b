"""Logo variation orchestrator.

Fans the layout engine out over all three layouts at once and gathers the
exports into a VariationSet. Layouts are independent: they share only the
read-only asset, finish in any order, and a failed layout never stops its
siblings. Completion is signalled exactly once, after the last layout
succeeds. A layout that fails is reported through the failure callback and
recorded in the set's ``failures``; completion then never fires for that
request.

Every generate call starts a new generation. Exports of an older
generation still finish but their callbacks are suppressed, so the most
recent request always wins.
"""

import asyncio
import time
from collections.abc import Callable

from brandmark.core.compositor import LogoCompositor
from brandmark.domain import LogoAsset, LogoLayout, VariationSet
from brandmark.exceptions import CompositionError
from brandmark.utils import CompositionLogger

CompleteCallback = Callable[[VariationSet], None]
FailureCallback = Callable[[LogoLayout, CompositionError], None]


class LogoVariationOrchestrator:
    """Drives the layout engine across all layouts concurrently.

    Example:
        orchestrator = LogoVariationOrchestrator(LogoCompositor())
        variations = await orchestrator.generate(
            asset,
            on_complete=lambda v: print(v.to_dict().keys()),
        )
    """

    def __init__(
        self,
        compositor: LogoCompositor | None = None,
        composition_logger: CompositionLogger | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            compositor: Layout engine to drive
            composition_logger: Logger collecting per-layout statistics
        """
        self.compositor = compositor if compositor is not None else LogoCompositor()
        self.composition_logger = (
            composition_logger if composition_logger is not None else CompositionLogger()
        )
        self._generation = 0

    @property
    def generation(self) -> int:
        """Number of the most recent generate request."""
        return self._generation

    async def generate(
        self,
        asset: LogoAsset,
        on_complete: CompleteCallback | None = None,
        on_failure: FailureCallback | None = None,
    ) -> VariationSet | None:
        """Composite every layout of an asset.

        Args:
            asset: Icon and compositing inputs
            on_complete: Called once with the full set when all layouts succeed
            on_failure: Called for each layout that raised CompositionError

        Returns:
            The (possibly partial) VariationSet, or None when the asset has
            no icon and nothing was done
        """
        if not asset.has_icon():
            return None

        self._generation += 1
        generation = self._generation
        variations = VariationSet()
        fired = False

        async def run(layout: LogoLayout) -> None:
            nonlocal fired
            self.composition_logger.log_layout_start(layout.value, generation)
            started = time.perf_counter()

            try:
                data_url = await self.compositor.composite_asset(asset, layout)
            except CompositionError as e:
                variations.record_failure(layout, e.reason)
                self.composition_logger.log_layout_failed(layout.value, e)
                if on_failure is not None and self._is_current(generation, layout):
                    on_failure(layout, e)
                return

            self.composition_logger.log_layout_complete(
                layout.value, (time.perf_counter() - started) * 1000
            )
            variations.set(layout, data_url)

            if variations.is_complete() and not fired and self._is_current(generation, layout):
                fired = True
                self.composition_logger.log_variations_complete(generation)
                if on_complete is not None:
                    on_complete(variations)

        results = await asyncio.gather(
            *(run(layout) for layout in LogoLayout),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result

        return variations

    def _is_current(self, generation: int, layout: LogoLayout) -> bool:
        if generation == self._generation:
            return True
        self.composition_logger.log_stale(layout.value, generation, self._generation)
        return False
