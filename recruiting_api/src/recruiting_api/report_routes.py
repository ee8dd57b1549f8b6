# src/recruiting_api/report_routes.py

from typing import Annotated, Any, Dict, Optional

from fastapi import APIRouter, Depends, Path, Request

from .auth_utils import get_current_user

# Every report requires a valid bearer token.
router = APIRouter(dependencies=[Depends(get_current_user)])

Month = Annotated[int, Path(ge=1, le=12, description="Month of the report (1-12)")]


class ReportSource:
    """
    Computes report payloads. The default returns empty series; a data
    layer plugs in its own subclass through create_app(report_source=...).
    """

    def _empty(self, kind: str, year: int, month: Optional[int] = None) -> Dict[str, Any]:
        report: Dict[str, Any] = {"report": kind, "year": year}
        if month is not None:
            report["month"] = month
        report["data"] = []
        return report

    def category_monthly(self, year: int, month: int) -> Dict[str, Any]:
        return self._empty("category", year, month)

    def category_yearly(self, year: int) -> Dict[str, Any]:
        return self._empty("category", year)

    def qualification_monthly(self, year: int, month: int) -> Dict[str, Any]:
        return self._empty("qualification", year, month)

    def qualification_yearly(self, year: int) -> Dict[str, Any]:
        return self._empty("qualification", year)


def get_report_source(request: Request) -> ReportSource:
    return request.app.state.report_source


@router.get("/category/monthly/{year}/{month}")
async def category_monthly(year: int, month: Month,
                           source: ReportSource = Depends(get_report_source)) -> Dict[str, Any]:
    return source.category_monthly(year, month)


@router.get("/category/yearly/{year}")
async def category_yearly(year: int, source: ReportSource = Depends(get_report_source)) -> Dict[str, Any]:
    return source.category_yearly(year)


@router.get("/qualification/monthly/{year}/{month}")
async def qualification_monthly(year: int, month: Month,
                                source: ReportSource = Depends(get_report_source)) -> Dict[str, Any]:
    return source.qualification_monthly(year, month)


@router.get("/qualification/yearly/{year}")
async def qualification_yearly(year: int, source: ReportSource = Depends(get_report_source)) -> Dict[str, Any]:
    return source.qualification_yearly(year)
