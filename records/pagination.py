from __future__ import annotations

from typing import Any, cast

from django.core.paginator import Page
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from config.api.responses import success_response


class RecordPagination(PageNumberPagination):
    """`?page=&limit=` pagination wrapped in the success envelope."""

    page_size = 50
    page_size_query_param = "limit"
    max_page_size = 100

    def get_paginated_response(self, data: Any) -> Response:
        page = cast(Page, self.page)
        paginator = page.paginator
        return success_response(
            {
                "records": list(data),
                "pagination": {
                    "page": page.number,
                    "limit": paginator.per_page,
                    "total": paginator.count,
                    "pages": paginator.num_pages,
                },
            },
            message="Weather records",
        )

    def get_paginated_response_schema(
        self, schema: dict[str, Any]
    ) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "status": {"type": "integer"},
                "message": {"type": "string"},
                "data": {
                    "type": "object",
                    "properties": {
                        "records": schema,
                        "pagination": {
                            "type": "object",
                            "properties": {
                                "page": {"type": "integer"},
                                "limit": {"type": "integer"},
                                "total": {"type": "integer"},
                                "pages": {"type": "integer"},
                            },
                        },
                    },
                },
                "errors": {"type": "object", "nullable": True},
            },
        }
