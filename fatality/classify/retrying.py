"""Retry predicate for callers that drive retries with tenacity."""

from __future__ import annotations

import logging

from tenacity import retry_if_exception

from fatality.classify.policy import classify_exception
from fatality.common.config_loader import SeverityPolicy


class retry_if_non_fatal(retry_if_exception):
    """Retry only when the raised exception classifies as non fatal."""

    def __init__(self, policy: SeverityPolicy | None = None, logger: logging.Logger | None = None) -> None:
        self.policy = policy or SeverityPolicy()
        self.logger = logger
        super().__init__(self._is_non_fatal)

    def _is_non_fatal(self, exc: BaseException) -> bool:
        return classify_exception(exc, self.policy, logger=self.logger).is_error()
