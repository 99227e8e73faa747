import pytest
from vacation_planner.services.budget_allocator import allocate_budget, daily_allowances

def test_allocate_3000():
    breakdown = allocate_budget(3000.0)

    assert breakdown.transportation == pytest.approx(1200.0)
    assert breakdown.accommodation == pytest.approx(900.0)
    assert breakdown.food == pytest.approx(450.0)
    assert breakdown.activities == pytest.approx(300.0)
    assert breakdown.misc == pytest.approx(150.0)
    assert breakdown.currency == "USD"

@pytest.mark.parametrize("total", [0.0, 1.0, 999.99, 12345.67])
def test_categories_sum_to_total(total):
    breakdown = allocate_budget(total, "EUR")

    assert breakdown.total_cost == pytest.approx(total)
    assert breakdown.total == total
    assert breakdown.remaining == 0
    assert breakdown.within_budget == True
    assert breakdown.currency == "EUR"

def test_negative_budget_is_not_clamped():
    breakdown = allocate_budget(-100.0)

    assert breakdown.transportation == pytest.approx(-40.0)
    assert breakdown.misc == pytest.approx(-5.0)

def test_daily_allowances():
    allowances = daily_allowances(allocate_budget(3000.0), 5)

    assert allowances["activities"] == pytest.approx(60.0)
    assert allowances["food"] == pytest.approx(90.0)

def test_daily_allowances_rejects_empty_trip():
    with pytest.raises(ValueError):
        daily_allowances(allocate_budget(3000.0), 0)
