"""Source selection for aggregation requests."""

from __future__ import annotations

import json
from urllib.parse import quote

from services.aggregation_bff_service.config import AggregationBFFSettings
from services.aggregation_bff_service.domain.sources import SourceName, SourceRequest

USER_PREFERENCES_COLLECTION = "user_preferences"
USER_AUDIT_LOGS_TABLE = "user_audit_logs"


def _path_segment(value: str) -> str:
    """Percent-encode a value so it stays a single URL path segment."""
    encoded = quote(value, safe="")
    if encoded.strip(".") == "":
        return encoded.replace(".", "%2E")
    return encoded


class SourcePlanner:
    """Builds SourceRequests from request parameters and configured targets."""

    def __init__(self, config: AggregationBFFSettings) -> None:
        self._config = config

    def plan_data_sources(
        self,
        mongo_collection: str | None = None,
        sql_table: str | None = None,
        user_id: str | None = None,
    ) -> list[SourceRequest]:
        """Select sources for the generic data aggregation.

        A source is attempted only when its parameter is present; absent
        parameters skip the source entirely. A blank ``user_id`` counts as absent.
        """
        requests: list[SourceRequest] = []
        if user_id is not None and not user_id.strip():
            user_id = None

        if mongo_collection:
            params = {"collection": mongo_collection}
            if user_id:
                params["filter"] = json.dumps({"userId": user_id})
            requests.append(self._mongodb_request(params))

        if sql_table:
            params = {"table": sql_table}
            if user_id:
                params["where"] = f"userId = {user_id}"
            requests.append(self._azuresql_request(params))

        if user_id:
            requests.append(self._user_profile_request(user_id))
            requests.append(self._transaction_summary_request(user_id))

        return requests

    def plan_user_sources(self, user_id: str) -> list[SourceRequest]:
        """Select all four sources for a single user's aggregated view."""
        return [
            self._mongodb_request(
                {
                    "collection": USER_PREFERENCES_COLLECTION,
                    "filter": json.dumps({"userId": user_id}),
                }
            ),
            self._azuresql_request(
                {"table": USER_AUDIT_LOGS_TABLE, "where": f"userId = '{user_id}'"}
            ),
            self._user_profile_request(user_id),
            self._transaction_summary_request(user_id),
        ]

    def _function_headers(self) -> dict[str, str]:
        return {"x-functions-key": self._config.get_function_key()}

    def _mongodb_request(self, params: dict[str, str]) -> SourceRequest:
        return SourceRequest(
            name=SourceName.MONGODB,
            url=self._config.MONGODB_FUNCTION_URL,
            timeout_seconds=self._config.MONGODB_FUNCTION_TIMEOUT_SECONDS,
            params=params,
            headers=self._function_headers(),
        )

    def _azuresql_request(self, params: dict[str, str]) -> SourceRequest:
        return SourceRequest(
            name=SourceName.AZURESQL,
            url=self._config.AZURESQL_FUNCTION_URL,
            timeout_seconds=self._config.AZURESQL_FUNCTION_TIMEOUT_SECONDS,
            params=params,
            headers=self._function_headers(),
        )

    def _user_profile_request(self, user_id: str) -> SourceRequest:
        return SourceRequest(
            name=SourceName.USER_SERVICE,
            url=f"{self._config.USER_SERVICE_URL}/api/users/profile/{_path_segment(user_id)}",
            timeout_seconds=self._config.USER_SERVICE_TIMEOUT_SECONDS,
        )

    def _transaction_summary_request(self, user_id: str) -> SourceRequest:
        return SourceRequest(
            name=SourceName.TRANSACTION_SERVICE,
            url=(
                f"{self._config.TRANSACTION_SERVICE_URL}/api/transactions/user/"
                f"{_path_segment(user_id)}/summary"
            ),
            timeout_seconds=self._config.TRANSACTION_SERVICE_TIMEOUT_SECONDS,
        )
