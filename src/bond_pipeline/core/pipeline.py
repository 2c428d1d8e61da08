"""Trading pipeline assembly and replay.

TradingPipeline builds every stage, declares the listener graph,
assembles it once and then replays the input files in order: prices,
trades, market data, inquiries. Each input record is processed to
quiescence before the next one is read.

A record whose cascade raises a TradingError is skipped: the error is
logged and counted and replay continues with the next record. Any other
exception is a bug and propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bond_pipeline.booking.connector import TradeConnector
from bond_pipeline.booking.service import ExecutionBookingListener, TradeBookingService
from bond_pipeline.core.config import Compression, PipelineConfig
from bond_pipeline.core.connector import LineConnector
from bond_pipeline.core.store import KeyedStore
from bond_pipeline.core.wiring import ListenerGraph
from bond_pipeline.domain.errors import TradingError
from bond_pipeline.domain.risk import PV01
from bond_pipeline.execution.algo import AlgoExecutionService
from bond_pipeline.execution.service import ExecutionService
from bond_pipeline.inquiry.connector import InquiryConnector
from bond_pipeline.inquiry.service import InquiryService
from bond_pipeline.market_data.connector import MarketDataConnector
from bond_pipeline.market_data.service import MarketDataService
from bond_pipeline.monitoring.gui import Clock, GUIService, monotonic_ms
from bond_pipeline.monitoring.metrics import PipelineMetrics
from bond_pipeline.positions.service import PositionService
from bond_pipeline.pricing.connector import PriceConnector
from bond_pipeline.pricing.service import PricingService
from bond_pipeline.recording.events import HistoryType
from bond_pipeline.recording.recorder import HistoricalDataService, HistoryRecorder
from bond_pipeline.reference.bonds import BondReference
from bond_pipeline.reference.ids import OrderIdFactory, new_order_id
from bond_pipeline.risk.service import RiskService
from bond_pipeline.streaming.algo import AlgoStreamingService
from bond_pipeline.streaming.service import StreamingService

logger = logging.getLogger(__name__)


@dataclass
class ReplayResult:
    """Outcome of replaying one input source.

    processed counts input lines read without error, not values emitted.
    Market data lines that are only buffered towards the next book
    snapshot count as processed.
    """

    source: str
    processed: int = 0
    failed: int = 0


class TradingPipeline:
    """Owns every stage and the fixed listener graph between them."""

    def __init__(
        self,
        config: PipelineConfig | None = None,
        reference: BondReference | None = None,
        metrics: PipelineMetrics | None = None,
        order_ids: OrderIdFactory = new_order_id,
        clock: Clock = monotonic_ms,
    ) -> None:
        """Build stages and assemble the listener graph.

        Args:
            config: Pipeline configuration (defaults if None)
            reference: Static bond lookup
            metrics: Metrics collector (a private one if None)
            order_ids: Factory for execution order ids
            clock: Millisecond clock for the GUI throttle
        """
        self.config = config or PipelineConfig()
        self.reference = reference or BondReference()
        self.metrics = metrics or PipelineMetrics()

        cfg = self.config

        # Stages
        self.market_data = MarketDataService()
        self.pricing = PricingService()
        self.algo_streaming = AlgoStreamingService(
            visible_sizes=cfg.streaming.visible_sizes,
            hidden_ratio=cfg.streaming.hidden_ratio,
        )
        self.streaming = StreamingService()
        self.algo_execution = AlgoExecutionService(
            spread_threshold=cfg.execution.spread_threshold,
            market=cfg.execution.market,
            order_ids=order_ids,
        )
        self.execution = ExecutionService()
        self.booking = TradeBookingService()
        self.booking_listener = ExecutionBookingListener(self.booking, cfg.booking.books)
        self.positions = PositionService()
        self.risk = RiskService(self.reference)
        self.inquiries = InquiryService(quote_price=cfg.inquiry.quote_price)
        self.gui = (
            GUIService(throttle_ms=cfg.gui.throttle_ms, clock=clock) if cfg.gui.enabled else None
        )

        # History
        self.recorder: HistoryRecorder | None = None
        self.history: dict[HistoryType, HistoricalDataService] = {}
        if cfg.history.enabled:
            self.recorder = HistoryRecorder(
                output_dir=cfg.history.output_dir,
                compress=cfg.history.compression == Compression.GZIP,
            )
            for record_type in HistoryType:
                if record_type == HistoryType.GUI and self.gui is None:
                    continue
                self.history[record_type] = HistoricalDataService(record_type, self.recorder)

        # Connectors
        self.connectors: dict[str, LineConnector[Any]] = {
            "prices": PriceConnector(self.reference),
            "trades": TradeConnector(self.reference),
            "market_data": MarketDataConnector(self.reference, cfg.market_data.book_depth),
            "inquiries": InquiryConnector(self.reference),
        }
        self.sinks: dict[str, Callable[[Any], Any]] = {
            "prices": self.pricing.on_message,
            "trades": self.booking.book_trade,
            "market_data": self.market_data.on_message,
            "inquiries": self.inquiries.on_message,
        }

        self.graph = self._declare_graph()
        self.graph.assemble()
        for stage in self.stages():
            stage.seal()

    def _declare_graph(self) -> ListenerGraph:
        graph = ListenerGraph()

        graph.connect(self.pricing, self.algo_streaming.publish_price, "algo_streaming")
        if self.gui is not None:
            graph.connect(self.pricing, self.gui.on_price, "gui")
        graph.connect(self.algo_streaming, self.streaming.on_algo_stream, "streaming")
        graph.connect(self.market_data, self.algo_execution.execute, "algo_execution")
        graph.connect(self.algo_execution, self.execution.on_algo_execution, "execution")
        graph.connect(self.execution, self.booking_listener, "trade_booking")
        graph.connect(self.booking, self.positions.add_trade, "position")
        graph.connect(self.positions, self.risk.add_position, "risk")

        history_sources: list[tuple[HistoryType, KeyedStore[Any, Any] | None]] = [
            (HistoryType.STREAMING, self.streaming),
            (HistoryType.EXECUTION, self.execution),
            (HistoryType.POSITION, self.positions),
            (HistoryType.RISK, self.risk),
            (HistoryType.INQUIRY, self.inquiries),
            (HistoryType.GUI, self.gui),
        ]
        for record_type, producer in history_sources:
            sink = self.history.get(record_type)
            if producer is not None and sink is not None:
                graph.connect(producer, sink.persist_data, sink.name)

        for stage in self.stages():
            graph.connect(stage, self.metrics.stage_listener(stage.name), f"metrics.{stage.name}")

        return graph

    def stages(self) -> list[KeyedStore[Any, Any]]:
        """Return every processing stage, upstream first."""
        stages: list[KeyedStore[Any, Any]] = [
            self.pricing,
            self.algo_streaming,
            self.streaming,
            self.market_data,
            self.algo_execution,
            self.execution,
            self.booking,
            self.positions,
            self.risk,
            self.inquiries,
        ]
        if self.gui is not None:
            stages.append(self.gui)
        return stages

    def replay(self, source: str, lines: Iterable[tuple[int, str]]) -> ReplayResult:
        """Feed numbered input lines of one source through the pipeline.

        Args:
            source: Connector name ("prices", "trades", "market_data", "inquiries")
            lines: (line number, line) pairs

        Returns:
            Counts of processed and skipped lines
        """
        connector = self.connectors[source]
        sink = self.sinks[source]
        result = ReplayResult(source=source)

        for number, line in lines:
            try:
                value = connector.parse_line(line)
                if value is not None:
                    sink(value)
            except TradingError as e:
                result.failed += 1
                self.metrics.record_failed(source, type(e).__name__)
                logger.warning(f"Skipping {source} line {number}: {e}")
                continue

            result.processed += 1
            self.metrics.record_replayed(source)

        return result

    def replay_file(self, source: str, path: str | Path) -> ReplayResult:
        """Replay one input file.

        A missing file is logged and treated as empty.
        """
        path = Path(path)
        if not path.exists():
            logger.warning(f"Input file not found for {source}: {path}")
            return ReplayResult(source=source)

        logger.info(f"Replaying {source} from {path}")
        result = self.replay(source, LineConnector.read_lines(path))
        logger.info(f"Replayed {source}: {result.processed} processed, {result.failed} skipped")
        return result

    def run(self) -> list[ReplayResult]:
        """Replay all input files in order and close history files.

        Returns:
            One result per source
        """
        inputs = self.config.inputs
        files = [
            ("prices", inputs.prices_file),
            ("trades", inputs.trades_file),
            ("market_data", inputs.market_data_file),
            ("inquiries", inputs.inquiries_file),
        ]
        try:
            return [self.replay_file(source, inputs.path(name)) for source, name in files]
        finally:
            self.close()

    def sector_risk(self) -> list[PV01]:
        """Return bucketed risk for every configured sector."""
        return [
            self.risk.bucketed_risk(self.reference.sector(name, product_ids))
            for name, product_ids in self.config.risk.sectors.items()
        ]

    def close(self) -> None:
        """Close history files."""
        if self.recorder is not None:
            self.recorder.close()
