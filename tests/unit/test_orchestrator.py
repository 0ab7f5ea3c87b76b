"""Unit tests for the logo variation orchestrator."""

import asyncio

import pytest

from brandmark.core.orchestrator import LogoVariationOrchestrator
from brandmark.domain import LogoAsset, LogoLayout
from brandmark.exceptions import CompositionError
from brandmark.utils import CompositionLogger

ASSET = LogoAsset(icon="data:image/png;base64,AAAA", company_name="Acme", font_family="Inter")


class FakeCompositor:
    """Compositor stand-in with scripted per-layout behaviour."""

    def __init__(self, delays=None, failures=None, errors=None, gates=None):
        self.delays = delays or {}
        self.failures = failures or set()
        self.errors = errors or {}
        self.gates = gates or {}
        self.finished: list[LogoLayout] = []
        self.calls: list[tuple[str, LogoLayout]] = []

    async def composite_asset(self, asset, layout):
        self.calls.append((asset.company_name, layout))
        gate = self.gates.get(asset.company_name)
        if gate is not None:
            await gate.wait()
        await asyncio.sleep(self.delays.get(layout, 0))
        if layout in self.errors:
            raise self.errors[layout]
        if layout in self.failures:
            raise CompositionError(layout.value, "icon could not be loaded")
        self.finished.append(layout)
        return f"data:image/png;base64,{asset.company_name}-{layout.value}"


class TestLogoVariationOrchestrator:
    """Tests for LogoVariationOrchestrator class."""

    def test_all_layouts_complete(self):
        completed = []
        orchestrator = LogoVariationOrchestrator(FakeCompositor())

        variations = asyncio.run(orchestrator.generate(ASSET, on_complete=completed.append))

        assert variations is not None
        assert variations.is_complete()
        assert completed == [variations]
        assert set(variations.to_dict()) == {"horizontal", "vertical", "iconOnly"}

    def test_no_icon_does_nothing(self):
        completed = []
        compositor = FakeCompositor()
        orchestrator = LogoVariationOrchestrator(compositor)
        asset = LogoAsset(icon="", company_name="Acme", font_family="Inter")

        assert asyncio.run(orchestrator.generate(asset, on_complete=completed.append)) is None
        assert completed == []
        assert compositor.calls == []
        assert orchestrator.generation == 0

    def test_completion_after_last_layout(self):
        """Test completion fires once, after the slowest layout, in any finish order."""
        snapshots = []
        compositor = FakeCompositor(
            delays={
                LogoLayout.HORIZONTAL: 0.03,
                LogoLayout.VERTICAL: 0.0,
                LogoLayout.ICON_ONLY: 0.01,
            }
        )
        orchestrator = LogoVariationOrchestrator(compositor)

        asyncio.run(
            orchestrator.generate(
                ASSET, on_complete=lambda v: snapshots.append(list(compositor.finished))
            )
        )

        assert compositor.finished == [
            LogoLayout.VERTICAL,
            LogoLayout.ICON_ONLY,
            LogoLayout.HORIZONTAL,
        ]
        assert snapshots == [compositor.finished]

    def test_layouts_run_concurrently(self):
        """Test all three composites are in flight before any finishes."""
        compositor = FakeCompositor(delays={layout: 0.01 for layout in LogoLayout})
        orchestrator = LogoVariationOrchestrator(compositor)

        asyncio.run(orchestrator.generate(ASSET))

        assert [layout for _, layout in compositor.calls] == list(LogoLayout)

    def test_failed_layout_isolated(self):
        completed = []
        failed = []
        compositor = FakeCompositor(failures={LogoLayout.VERTICAL})
        orchestrator = LogoVariationOrchestrator(compositor)

        variations = asyncio.run(
            orchestrator.generate(
                ASSET,
                on_complete=completed.append,
                on_failure=lambda layout, error: failed.append((layout, error)),
            )
        )

        assert completed == []
        assert [layout for layout, _ in failed] == [LogoLayout.VERTICAL]
        assert isinstance(failed[0][1], CompositionError)
        assert variations is not None
        assert variations.horizontal and variations.icon_only
        assert variations.vertical is None
        assert variations.failures == {LogoLayout.VERTICAL: "icon could not be loaded"}

    def test_unexpected_error_propagates(self):
        compositor = FakeCompositor(errors={LogoLayout.ICON_ONLY: RuntimeError("bug")})
        orchestrator = LogoVariationOrchestrator(compositor)

        with pytest.raises(RuntimeError, match="bug"):
            asyncio.run(orchestrator.generate(ASSET))

    def test_latest_request_wins(self):
        """Test exports of a superseded request never reach the callbacks."""
        completions = []

        async def scenario():
            gate = asyncio.Event()
            compositor = FakeCompositor(gates={"Old Co": gate})
            orchestrator = LogoVariationOrchestrator(compositor)
            old = LogoAsset(icon="old.png", company_name="Old Co", font_family="Inter")
            new = LogoAsset(icon="new.png", company_name="New Co", font_family="Inter")

            first = asyncio.create_task(
                orchestrator.generate(old, on_complete=lambda v: completions.append("old"))
            )
            await asyncio.sleep(0)
            assert orchestrator.generation == 1

            await orchestrator.generate(new, on_complete=lambda v: completions.append("new"))
            assert orchestrator.generation == 2

            gate.set()
            stale = await first
            return stale

        stale = asyncio.run(scenario())

        assert completions == ["new"]
        assert stale is not None and stale.is_complete()

    def test_stats_recorded(self):
        composition_logger = CompositionLogger()
        compositor = FakeCompositor(failures={LogoLayout.HORIZONTAL})
        orchestrator = LogoVariationOrchestrator(compositor, composition_logger)

        asyncio.run(orchestrator.generate(ASSET))

        stats = composition_logger.stats
        assert stats.completed_count == 2
        assert stats.failed_count == 1
        assert stats.errors[0][0] == "horizontal"
        assert set(stats.timings_ms) == {"vertical", "icon-only"}
