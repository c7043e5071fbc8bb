from datetime import date
import pytest
from flatshare.service.balance_aggregator import BalanceAggregator
from flatshare.service.payment_splitter import PaymentSplitter


def summary_for(summary, user):
    return next(s for s in summary["debt_summaries"] if s["user_id"] == user.id)


def test_user_without_group_gets_zero_summary(make_user):
    user = make_user()

    assert BalanceAggregator.summary(user) == BalanceAggregator.empty_summary()


def test_opposite_debts_are_netted(make_group):
    _, (a, b) = make_group(2)
    PaymentSplitter.create_payment(a, "Groceries", 30.0, date(2024, 5, 1), [a.id, b.id])
    PaymentSplitter.create_payment(b, "Coffee", 10.0, date(2024, 5, 2), [a.id, b.id])

    for_a = BalanceAggregator.summary(a)
    for_b = BalanceAggregator.summary(b)

    assert summary_for(for_a, b)["owes_you"] == pytest.approx(10.0)
    assert summary_for(for_a, b)["you_owe"] == 0.0
    assert for_a["total_owed_to_you"] == pytest.approx(10.0)
    assert for_b["total_you_owe"] == pytest.approx(10.0)
    assert summary_for(for_b, a)["owes_you"] == 0.0


def test_net_never_reports_both_directions():
    assert BalanceAggregator.net(5.0, 12.0) == (0.0, 7.0)
    assert BalanceAggregator.net(12.0, 5.0) == (7.0, 0.0)
    assert BalanceAggregator.net(4.0, 4.0) == (0.0, 0.0)


def test_members_without_debts_are_listed_with_zero(make_group):
    _, (a, b, c) = make_group(3)
    PaymentSplitter.create_payment(a, "Pizza", 20.0, date(2024, 5, 1), [a.id, b.id])

    summaries = BalanceAggregator.summary(a)["debt_summaries"]

    assert [s["user_id"] for s in summaries] == [b.id, c.id]
    assert summaries[1]["owes_you"] == 0.0
    assert summaries[1]["you_owe"] == 0.0
    assert summaries[1]["avatar_url"].startswith("https://api.dicebear.com/7.x/personas/png")


def test_summary_is_stable_without_writes(make_group):
    _, (a, b, c) = make_group(3)
    PaymentSplitter.create_payment(a, "Rent", 900.0, date(2024, 5, 1), [a.id, b.id, c.id])
    PaymentSplitter.create_payment(c, "Internet", 30.0, date(2024, 5, 3), [a.id, b.id, c.id])

    assert BalanceAggregator.summary(a) == BalanceAggregator.summary(a)


def test_recent_payments_newest_first(make_group):
    _, (a, b) = make_group(2)
    older = PaymentSplitter.create_payment(a, "Old", 10.0, date(2024, 1, 1), [a.id, b.id])
    newer = PaymentSplitter.create_payment(b, "New", 10.0, date(2024, 3, 1), [a.id, b.id])

    assert BalanceAggregator.summary(a)["recent_payments"] == [newer, older]


def test_totals_are_floats_for_a_lone_member(make_group):
    _, (a,) = make_group(1)

    summary = BalanceAggregator.summary(a)

    assert summary["debt_summaries"] == []
    assert isinstance(summary["total_owed_to_you"], float)
    assert isinstance(summary["total_you_owe"], float)
