import unittest

import httpx

from recruiting_web.api import ApiAuthenticationError, ApiHTTPError, create_client
from recruiting_web.navigation import Navigator
from recruiting_web.reports import (
    get_monthly_category_report,
    get_monthly_qualification_report,
    get_yearly_category_report,
    get_yearly_qualification_report,
)
from recruiting_web.session_data import SessionStore


class ReportAccessorTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        self.requests = []
        self.status_code = 200
        self.body = {"data": [{"category": "Engineering", "applications": 12}]}

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(self.status_code, json=self.body)

        self.session = SessionStore({"token": "abc123"})
        self.navigator = Navigator(current_path="/admin/reports")
        self.client = create_client(
            "http://testserver",
            session=self.session,
            navigator=self.navigator,
            transport=httpx.MockTransport(handler),
            trace=False,
        )

    async def asyncTearDown(self) -> None:
        await self.client.aclose()

    async def test_monthly_category_report(self) -> None:
        result = await get_monthly_category_report(self.client, 2024, 6)

        request = self.requests[0]
        self.assertEqual(request.method, "GET")
        self.assertEqual(request.url.path, "/api/reports/category/monthly/2024/6")
        self.assertEqual(request.headers["Authorization"], "Bearer abc123")
        self.assertEqual(result, self.body)

    async def test_each_accessor_hits_its_endpoint(self) -> None:
        cases = [
            (get_yearly_category_report, (2023,), "/api/reports/category/yearly/2023"),
            (get_monthly_qualification_report, (2024, 12), "/api/reports/qualification/monthly/2024/12"),
            (get_yearly_qualification_report, (2022,), "/api/reports/qualification/yearly/2022"),
        ]
        for accessor, args, path in cases:
            with self.subTest(accessor=accessor.__name__):
                result = await accessor(self.client, *args)
                self.assertEqual(self.requests[-1].url.path, path)
                self.assertEqual(self.requests[-1].headers["Authorization"], "Bearer abc123")
                self.assertEqual(result, self.body)

    async def test_out_of_range_month_is_forwarded(self) -> None:
        self.status_code = 422
        self.body = {"detail": "month must be between 1 and 12"}

        with self.assertRaises(ApiHTTPError) as ctx:
            await get_monthly_qualification_report(self.client, 2024, 13)

        self.assertEqual(self.requests[0].url.path, "/api/reports/qualification/monthly/2024/13")
        self.assertEqual(ctx.exception.status_code, 422)

    async def test_rejected_token_goes_through_session_recovery(self) -> None:
        self.status_code = 401
        self.body = {"detail": "Could not validate credentials"}

        with self.assertRaises(ApiAuthenticationError):
            await get_yearly_category_report(self.client, 2024)

        self.assertIsNone(self.session.token)
        self.assertEqual(self.session.redirect_after_login, "/admin/reports")
        self.assertEqual(self.navigator.current_path, "/login")


if __name__ == "__main__":
    unittest.main()
