"""
Rule list updater.

Downloads a fresh copy of the Public Suffix List over HTTPS, checks that it
parses into a usable rule database, and writes it to disk. Only invoked on
request (``domain-addr update-rules``); name parsing never goes online.
"""

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import httpx

from domain_addr.config import PSL_URL
from domain_addr.enums import RuleKind, RuleListErrorCode
from domain_addr.event_logger import EventLogger
from domain_addr.exceptions import RuleListError
from domain_addr.psl_loader import parse_rule_list


COMPONENT = "updater"

# A real list has thousands of rules; anything far below is a broken download
MIN_RULE_COUNT = 1000


@dataclass
class UpdateResult:
    """Outcome of a rule list download."""

    path: Path
    url: str
    rule_count: int
    wildcard_count: int
    exception_count: int
    size_bytes: int
    duration_ms: float


class RuleListUpdater:
    """Fetches the Public Suffix List and stores it atomically."""

    def __init__(
        self,
        url: str = PSL_URL,
        timeout: float = 30.0,
        min_rule_count: int = MIN_RULE_COUNT,
        client: Optional[httpx.Client] = None,
        logger: Optional[EventLogger] = None,
    ) -> None:
        """
        Initialize the updater.

        Args:
            url: HTTPS URL of the rule list
            timeout: Request timeout in seconds
            min_rule_count: Minimum number of rules a download must contain
            client: Optional preconfigured httpx client
            logger: Optional event logger
        """
        if urlparse(url).scheme.lower() != "https":
            raise ValueError(f"Rule list URL must use HTTPS: {url}")

        self._url = url
        self._timeout = timeout
        self._min_rule_count = min_rule_count
        self._client = client
        self._logger = logger

    def fetch(self) -> str:
        """
        Download the rule list text.

        Raises:
            RuleListError: On network errors or a non-200 response
        """
        owns_client = self._client is None
        client = self._client or httpx.Client(
            verify=True,
            timeout=httpx.Timeout(self._timeout),
            follow_redirects=True,
        )

        try:
            response = client.get(self._url, headers={"Accept": "text/plain"})
        except httpx.TimeoutException as e:
            raise RuleListError(
                code=RuleListErrorCode.DOWNLOAD_ERROR.value,
                message=f"Rule list download timed out after {self._timeout}s",
                details={"url": self._url},
            ) from e
        except httpx.HTTPError as e:
            raise RuleListError(
                code=RuleListErrorCode.DOWNLOAD_ERROR.value,
                message=f"Rule list download failed: {e}",
                details={"url": self._url},
            ) from e
        finally:
            if owns_client:
                client.close()

        if response.status_code != 200:
            raise RuleListError(
                code=RuleListErrorCode.DOWNLOAD_ERROR.value,
                message=f"Unexpected HTTP status: {response.status_code}",
                details={"url": self._url, "http_status_code": response.status_code},
            )

        return response.text

    def update(self, destination: Path) -> UpdateResult:
        """
        Download the rule list and write it to ``destination``.

        The file is replaced only after the download parsed successfully.

        Args:
            destination: Target file path

        Returns:
            UpdateResult describing the stored list

        Raises:
            RuleListError: If the download fails or holds too few rules
        """
        start_time = time.perf_counter()

        text = self.fetch()
        database = parse_rule_list(text.splitlines(), logger=self._logger)

        if len(database) < self._min_rule_count:
            raise RuleListError(
                code=RuleListErrorCode.DOWNLOAD_ERROR.value,
                message=f"Downloaded list has only {len(database)} rules",
                details={"url": self._url, "min_rule_count": self._min_rule_count},
            )

        destination = Path(destination)
        temp_path = destination.with_suffix(destination.suffix + ".tmp")
        data = text.encode("utf-8")

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_bytes(data)
            os.replace(temp_path, destination)
        except OSError as e:
            raise RuleListError(
                code=RuleListErrorCode.WRITE_ERROR.value,
                message=f"Could not write rule list: {e}",
                details={"path": str(destination)},
            ) from e

        result = UpdateResult(
            path=destination,
            url=self._url,
            rule_count=len(database),
            wildcard_count=database.count(RuleKind.WILDCARD),
            exception_count=database.count(RuleKind.EXCEPTION),
            size_bytes=len(data),
            duration_ms=(time.perf_counter() - start_time) * 1000,
        )

        if self._logger:
            self._logger.info(
                COMPONENT,
                "Rule list updated",
                {"path": str(destination), "url": self._url, "rules": result.rule_count},
            )

        return result
