# src/recruiting_web/reports.py

import typing

from .api import ApiClient

# Year and month are forwarded as given; the server validates ranges.


async def get_monthly_category_report(client: ApiClient, year: int, month: int) -> typing.Any:
    """
    Fetch monthly category report data.
    `month` is 1-12. Resolves to the decoded response body.
    """
    response = await client.get(f"/api/reports/category/monthly/{year}/{month}")
    return response.json()


async def get_yearly_category_report(client: ApiClient, year: int) -> typing.Any:
    """Fetch yearly category report data."""
    response = await client.get(f"/api/reports/category/yearly/{year}")
    return response.json()


async def get_monthly_qualification_report(client: ApiClient, year: int, month: int) -> typing.Any:
    """
    Fetch monthly qualification report data.
    `month` is 1-12. Resolves to the decoded response body.
    """
    response = await client.get(f"/api/reports/qualification/monthly/{year}/{month}")
    return response.json()


async def get_yearly_qualification_report(client: ApiClient, year: int) -> typing.Any:
    """Fetch yearly qualification report data."""
    response = await client.get(f"/api/reports/qualification/yearly/{year}")
    return response.json()
