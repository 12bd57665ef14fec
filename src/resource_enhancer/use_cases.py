"""Business logic use cases."""

from typing import Any, Iterable, Optional

from resource_enhancer.core import (
    BackendUnavailableError,
    EnhancedResource,
    ProcessingResult,
    ResourceBackend,
    ResponseValidator,
    build_fallback_resource,
    generate_resource_id,
    map_backend_resource,
)
from resource_enhancer.core.defaults import MISSING_RECORD_ERROR
from resource_enhancer.core.normalization import IdFactory


class ResourceEnhancementService:
    """Turn source URLs plus whatever the backend answers into enhanced resources.

    ``process_resources`` never raises and always returns exactly one record
    per input URL, in input order. Batch-level failures (network, HTTP
    status, unparseable or misshapen payload) give every URL a fallback
    record; a record that cannot be mapped only degrades itself.
    """

    def __init__(
        self,
        backend: ResourceBackend,
        validator: Optional[ResponseValidator] = None,
        id_factory: IdFactory = generate_resource_id,
    ) -> None:
        self.backend = backend
        self.validator = validator or ResponseValidator()
        self.id_factory = id_factory

    async def process_resources(
        self,
        urls: Iterable[str],
        project_context: Any,
        project_id: Optional[str] = None,
    ) -> ProcessingResult:
        """Enhance ``urls`` in the context of a project."""
        urls = list(urls)

        try:
            reply = await self.backend.submit(urls, project_context, project_id)
        except BackendUnavailableError as e:
            return self._fallback_batch(urls, str(e) or "Network error")
        except Exception as e:
            return self._fallback_batch(urls, str(e) or type(e).__name__)

        validation = self.validator.validate(reply)
        if not validation.ok:
            return self._fallback_batch(urls, validation.cause or "Unexpected response structure")

        success = validation.payload.get("success")
        if not isinstance(success, bool):
            success = True

        resources = [
            self._build_resource(url, record)
            for url, record in self._reconcile(urls, validation.resources)
        ]

        mapped = sum(1 for r in resources if r.success)
        print(f"✓ Enhanced {mapped}/{len(urls)} resources")

        return ProcessingResult(success=success, enhanced_resources=resources)

    def _build_resource(self, url: str, record: Any) -> EnhancedResource:
        if record is None:
            return build_fallback_resource(url, MISSING_RECORD_ERROR, id_factory=self.id_factory)
        return map_backend_resource(record, url=url, id_factory=self.id_factory)

    def _reconcile(self, urls: list[str], records: list[Any]) -> list[tuple[str, Any]]:
        """Pair every input URL with at most one backend record.

        A URL takes the first unclaimed record carrying the same ``url``;
        otherwise the record at its own position, provided that record
        carries no ``url`` at all. Records left unclaimed are dropped.
        """
        wanted = set(urls)
        by_url: dict[str, list[int]] = {}
        for index, record in enumerate(records):
            record_url = _record_url(record)
            if record_url in wanted:
                by_url.setdefault(record_url, []).append(index)

        pairs: list[tuple[str, Any]] = []
        claimed = 0
        for position, url in enumerate(urls):
            candidates = by_url.get(url)
            if candidates:
                pairs.append((url, records[candidates.pop(0)]))
                claimed += 1
            elif position < len(records) and _record_url(records[position]) is None:
                pairs.append((url, records[position]))
                claimed += 1
            else:
                pairs.append((url, None))

        if claimed < len(urls):
            print(f"  ⚠️  Backend returned no data for {len(urls) - claimed} of {len(urls)} resources")
        if claimed < len(records):
            print(f"  └─ Dropped {len(records) - claimed} unmatched backend records")

        return pairs

    def _fallback_batch(self, urls: list[str], cause: str) -> ProcessingResult:
        print(f"⚠️  Resource processing failed: {cause}")
        print(f"  └─ Using fallback data for {len(urls)} resources")

        resources = [
            build_fallback_resource(url, cause, id_factory=self.id_factory) for url in urls
        ]
        return ProcessingResult(success=False, enhanced_resources=resources, error=cause)


def _record_url(record: Any) -> Optional[str]:
    url = record.get("url") if isinstance(record, dict) else None
    if isinstance(url, str) and url.strip():
        return url
    return None
