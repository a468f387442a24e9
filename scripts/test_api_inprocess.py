"""
Backend API smoke test – in-process via TestClient (no separate server).
Run: python scripts/test_api_inprocess.py
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from fastapi.testclient import TestClient
from navigator.main import app

client = TestClient(app)
passed = failed = 0


def req(method, path, body=None, params=None):
    kwargs = {"headers": {"Accept": "application/json"}}
    if body is not None:
        kwargs["json"] = body
    if params:
        kwargs["params"] = params
    r = client.request(method, path, **kwargs)
    if r.status_code >= 400:
        raise RuntimeError(f"HTTP {r.status_code}: {r.text}")
    return r.json() if r.content else {}


def expect_status(method, path, status):
    r = client.request(method, path)
    if r.status_code != status:
        raise RuntimeError(f"expected {status}, got {r.status_code}: {r.text}")


def test(name, fn):
    global passed, failed
    try:
        fn()
        print(f"  OK  {name}")
        passed += 1
    except Exception as e:
        print(f"  FAIL {name}: {e}")
        failed += 1


def main():
    print("Thailand Navigator API Tests (in-process)\n" + "=" * 50)

    test("GET /", lambda: req("GET", "/"))
    test("GET /health", lambda: req("GET", "/health"))

    print("\n--- Rule engine ---")
    test("POST /rules/evaluate (tourist)", lambda: req("POST", "/rules/evaluate", {
        "nationality": "usa", "purpose_of_stay": ["tourism"], "intended_stay_duration": "short-term"}))
    test("POST /rules/evaluate (retiree)", lambda: req("POST", "/rules/evaluate", {
        "nationality": "uk", "purpose_of_stay": ["retirement"], "age": 55, "monthly_income": 1500}))

    print("\n--- Tax ---")
    test("POST /tax/analyze", lambda: req("POST", "/tax/analyze", {
        "nationality": "germany", "purpose_of_stay": ["digital-nomad"], "has_foreign_income": True,
        "days_in_thailand": 200}))
    test("GET /tax/treaty/usa", lambda: req("GET", "/tax/treaty/usa"))

    print("\n--- Legal ---")
    test("GET /legal/property", lambda: req("GET", "/legal/property"))
    test("GET /legal/property/condo-ownership", lambda: req("GET", "/legal/property/condo-ownership"))
    test("GET /legal/property/does-not-exist (404)",
         lambda: expect_status("GET", "/legal/property/does-not-exist", 404))
    test("GET /legal/resources?category=lawyers", lambda: req("GET", "/legal/resources", params={"category": "lawyers"}))

    print("\n--- Quotes ---")
    test("POST /quotes/estimate", lambda: req("POST", "/quotes/estimate", {
        "package": {"name": "Bangkok Classic", "duration": 3, "base_price_per_person": 12000},
        "request": {"number_of_adults": 2, "number_of_children": 1, "pickup_date": "2026-12-01"}}))
    test("POST /quotes/booking-financials", lambda: req("POST", "/quotes/booking-financials", {
        "revenue": 30000, "total_cost": 18000, "commission_rate": 12}))
    test("POST /quotes/financial-summary", lambda: req("POST", "/quotes/financial-summary", [
        {"booking_id": "b1", "status": "completed", "agent_id": "a1", "agent_name": "Nok",
         "revenue": 30000, "total_cost": 18000, "commission_rate": 12}]))
    test("POST /quotes/financial-summary/monthly", lambda: req("POST", "/quotes/financial-summary/monthly", [
        {"booking_id": "b1", "status": "confirmed", "pickup_date": "2026-12-01", "revenue": 30000,
         "total_cost": 18000, "costs": {"guide_fees": 4000, "transport": 6000}}], params={"year": 2026, "month": 12}))

    print("\n" + "=" * 50)
    print(f"Passed: {passed}  Failed: {failed}  Total: {passed + failed}")
    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    main()
