"""
Search Orchestrator — fan one query out to every engine concurrently.

Ties together QueryBuilder, Fetcher and ResultExtractor:

  1. Validates the query (blank queries never reach the network)
  2. Launches one pipeline per engine: build URL -> fetch -> extract
  3. Each pipeline writes only its own pre-allocated slot
  4. Joins all pipelines and returns a SearchReport in declaration order

A failure in one engine's pipeline becomes an empty, FAILED entry for
that engine and never affects the others.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from typing import Callable, Iterable, List, Optional

from models.enums import PipelineState
from models.schema import SearchReport, SearchRequest, SourceResult
from .config import SearchConfig
from .errors import QueryError
from .extractor import ResultExtractor
from .fetcher import Fetcher
from .query_builder import QueryBuilder
from .sources import SourceConfig, TokenGenerator, build_source_table

logger = logging.getLogger(__name__)

# callback(source_identifier, message) for UI progress
StatusCallback = Callable[[str, str], None]


class SearchOrchestrator:
    """
    Concurrent multi-engine search.

    Usage:
        orchestrator = SearchOrchestrator(config=SearchConfig.from_env())
        report = await orchestrator.search("rust ownership")
    """

    def __init__(
        self,
        sources: Optional[Iterable[SourceConfig]] = None,
        config: Optional[SearchConfig] = None,
        fetcher: Optional[Fetcher] = None,
        token_generator: Optional[TokenGenerator] = None,
    ):
        self._config = config or SearchConfig()
        self._sources: List[SourceConfig] = (
            list(sources) if sources is not None else self._config.sources()
        )
        build_source_table(self._sources)

        self._builder = QueryBuilder(self._sources, token_generator)
        self._fetcher = fetcher or Fetcher(self._config)
        self._extractor = ResultExtractor(self._sources, self._config.max_links)

        # per-slot states of the most recent search, for diagnostics
        self.last_states: List[PipelineState] = []

    @property
    def sources(self) -> List[SourceConfig]:
        return list(self._sources)

    async def search(
        self,
        raw_query: str,
        on_status: Optional[StatusCallback] = None,
    ) -> SearchReport:
        """
        Run every engine's pipeline concurrently and assemble the report.

        Raises:
            QueryError: If the query is blank; no pipeline is started
        """
        request = _validate_query(raw_query)

        slots: List[Optional[SourceResult]] = [None] * len(self._sources)
        states: List[PipelineState] = [PipelineState.PENDING] * len(self._sources)
        self.last_states = states

        await asyncio.gather(*(
            self._run_contained(i, source, request.raw_query, slots, states, on_status)
            for i, source in enumerate(self._sources)
        ))

        entries = [
            slot if slot is not None else SourceResult.empty(
                source.identifier, error="pipeline produced no result"
            )
            for source, slot in zip(self._sources, slots)
        ]
        report = SearchReport(query=request.raw_query, entries=entries)
        logger.info(
            f"Search '{request.raw_query}' finished: "
            f"{report.total_links} links from {len(entries)} engines"
        )
        return report

    # ------------------------------------------------------------------
    # Pipelines
    # ------------------------------------------------------------------

    async def _run_contained(
        self,
        index: int,
        source: SourceConfig,
        raw_query: str,
        slots: List[Optional[SourceResult]],
        states: List[PipelineState],
        on_status: Optional[StatusCallback],
    ) -> None:
        """Run one pipeline; any failure becomes an empty result in its slot."""
        _notify(on_status, source.identifier, f"Searching {source.identifier}...")
        try:
            pipeline = self._pipeline(index, source, raw_query, states)
            if self._config.pipeline_timeout:
                result = await asyncio.wait_for(pipeline, self._config.pipeline_timeout)
            else:
                result = await pipeline
        except asyncio.TimeoutError:
            logger.warning(
                f"{source.identifier}: timed out after {self._config.pipeline_timeout}s"
            )
            result = SourceResult.empty(
                source.identifier,
                error=f"timed out after {self._config.pipeline_timeout}s",
            )
        except Exception as e:
            logger.warning(f"{source.identifier}: search failed: {e}", exc_info=True)
            result = SourceResult.empty(
                source.identifier, error=f"{type(e).__name__}: {e}"
            )

        slots[index] = result
        states[index] = PipelineState.DONE
        _notify(on_status, source.identifier, f"{source.identifier} search complete!")

    async def _pipeline(
        self,
        index: int,
        source: SourceConfig,
        raw_query: str,
        states: List[PipelineState],
    ) -> SourceResult:
        url = self._builder.build_url(source.identifier, raw_query)

        states[index] = PipelineState.FETCHING
        outcome = await self._fetcher.fetch(url, source.identifier)

        states[index] = PipelineState.EXTRACTING
        result = self._extractor.extract(source.identifier, outcome)

        if self._config.delay:
            await asyncio.sleep(self._config.delay)
        return result


# ------------------------------------------------------------------
# Entry points
# ------------------------------------------------------------------

def perform_search(
    raw_query: str,
    orchestrator: Optional[SearchOrchestrator] = None,
    on_status: Optional[StatusCallback] = None,
) -> SearchReport:
    """
    Blocking entry point for the CLI.

    Raises:
        QueryError: If the query is blank
    """
    _validate_query(raw_query)
    orchestrator = orchestrator or SearchOrchestrator(config=SearchConfig.from_env())

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(orchestrator.search(raw_query, on_status=on_status))

    # Called from inside a running loop: run on a separate thread
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(
            asyncio.run, orchestrator.search(raw_query, on_status=on_status)
        )
        return future.result()


def _validate_query(raw_query: str) -> SearchRequest:
    if raw_query is None or not raw_query.strip():
        raise QueryError("Search query must not be blank")
    return SearchRequest(raw_query=raw_query)


def _notify(on_status: Optional[StatusCallback], source_identifier: str, message: str) -> None:
    """Advisory progress; a broken callback never affects the search."""
    if on_status is None:
        return
    try:
        on_status(source_identifier, message)
    except Exception as e:
        logger.debug(f"status callback failed: {e}")
