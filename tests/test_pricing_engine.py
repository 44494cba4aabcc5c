"""Tests for the pricing engine."""

from decimal import Decimal

import pytest

from cleanbook.pricing.engine import (
    compute_pricing,
    parse_amount,
    parse_duration_text,
    resolve_tip,
)
from cleanbook.schemas.booking_schema import BookingDraft, SelectedExtra, TipSpec
from cleanbook.schemas.catalog_schema import ServiceExtra

EXTRAS = [
    ServiceExtra(id=1, service_type="general", name="Oven", unit_price=Decimal("25"), duration_text="1hr 30mins"),
    ServiceExtra(id=2, service_type="general", name="Fridge", unit_price=Decimal("20"), duration_text="45mins"),
    ServiceExtra(id=3, service_type="general", name="Keys", unit_price=Decimal("10"), duration_text="whenever"),
    ServiceExtra(id=4, service_type="jet", name="Moss", unit_price=Decimal("30")),
    ServiceExtra(id=5, service_type="jet", name="Gutters", unit_price=Decimal("20")),
]

ALL_ROOMS_ZERO = dict(
    bedrooms=0, bathrooms=0, toilets=0, living_rooms=0,
    kitchen=0, utility_room=0, carpet_cleaning_areas=0,
)


class TestUnknownService:
    def test_missing_service_type_is_all_zero(self):
        result = compute_pricing(BookingDraft(), EXTRAS)
        assert result.total == 0
        assert result.subtotal == 0
        assert result.total_duration_minutes == 0
        assert result.quote_based is False

    def test_unrecognized_service_type_is_all_zero(self):
        draft = BookingDraft(service_type="window-washing", selected_extras=[SelectedExtra(extra_id=1)])
        result = compute_pricing(draft, EXTRAS)
        assert result.extras_total == 0
        assert result.total == 0


class TestRoomTally:
    def test_zero_rooms_hits_both_floors(self):
        result = compute_pricing(BookingDraft(service_type="deep", **ALL_ROOMS_ZERO))
        assert result.base_price == Decimal("60.00")
        assert result.base_duration_minutes == 120

    def test_rooms_are_additive(self):
        draft = BookingDraft(
            service_type="tenancy",
            bedrooms=2, bathrooms=1, toilets=1, living_rooms=1,
            kitchen=1, utility_room=1, carpet_cleaning_areas=1,
        )
        result = compute_pricing(draft)
        # 40 + 25 + 15 + 25 + 25 + 15 + 35
        assert result.base_price == Decimal("180.00")
        # 120 + 60 + 30 + 60 + 60 + 30 + 60
        assert result.base_duration_minutes == 420

    def test_price_floor_without_duration_floor(self):
        # 2 bedrooms + 1 toilet: £55 over 150 minutes
        draft = BookingDraft(service_type="deep", **{**ALL_ROOMS_ZERO, "bedrooms": 2, "toilets": 1})
        result = compute_pricing(draft)
        assert result.base_price == Decimal("60.00")
        assert result.base_duration_minutes == 150

    def test_both_floors_on_small_tally(self):
        # 1 toilet + 2 utility rooms: £45 over 90 minutes
        draft = BookingDraft(service_type="deep", **{**ALL_ROOMS_ZERO, "toilets": 1, "utility_room": 2})
        result = compute_pricing(draft)
        assert result.base_price == Decimal("60.00")
        assert result.base_duration_minutes == 120

    def test_no_floor_above_minimums(self):
        # 3 toilets + 2 utility rooms: £75 over 150 minutes
        draft = BookingDraft(service_type="deep", **{**ALL_ROOMS_ZERO, "toilets": 3, "utility_room": 2})
        result = compute_pricing(draft)
        assert result.base_price == Decimal("75.00")
        assert result.base_duration_minutes == 150

    def test_duration_field_is_ignored(self):
        a = compute_pricing(BookingDraft(service_type="deep", duration=2))
        b = compute_pricing(BookingDraft(service_type="deep", duration=5))
        assert a == b


class TestBedroomTiered:
    @pytest.mark.parametrize("bedrooms, hours", [(1, 2), (2, 3), (3, 4), (5, 6)])
    def test_hours_are_bedrooms_plus_one(self, bedrooms, hours):
        result = compute_pricing(BookingDraft(service_type="airbnb", bedrooms=bedrooms))
        assert result.base_duration_minutes == hours * 60
        assert result.base_price == Decimal(20 * hours)

    def test_three_bedrooms(self):
        result = compute_pricing(BookingDraft(service_type="airbnb", bedrooms=3))
        assert result.base_duration_minutes == 240
        assert result.base_price == Decimal("80.00")


class TestQuoteBased:
    def test_extras_only_no_tip(self):
        draft = BookingDraft(
            service_type="jet",
            tip=TipSpec.percent(20),
            selected_extras=[SelectedExtra(extra_id=4), SelectedExtra(extra_id=5)],
        )
        result = compute_pricing(draft, EXTRAS)
        assert result.quote_based is True
        assert result.base_price == 0
        assert result.base_duration_minutes == 0
        assert result.tip_amount == 0
        assert result.extras_total == Decimal("50.00")
        assert result.subtotal == Decimal("50.00")
        assert result.total == Decimal("50.00")

    def test_custom_tip_ignored(self):
        draft = BookingDraft(service_type="commercial", tip=TipSpec.custom("25"))
        result = compute_pricing(draft, EXTRAS)
        assert result.total == 0
        assert result.quote_based is True


class TestStandardHourly:
    def test_rate_times_hours(self):
        result = compute_pricing(BookingDraft(service_type="general", duration=3))
        assert result.base_price == Decimal("60.00")
        assert result.base_duration_minutes == 180

    def test_half_hour_duration(self):
        result = compute_pricing(BookingDraft(service_type="general", duration=2.5))
        assert result.base_price == Decimal("50.00")
        assert result.base_duration_minutes == 150

    def test_zero_duration_counts_as_one_hour(self):
        result = compute_pricing(BookingDraft(service_type="general", duration=0))
        assert result.base_price == Decimal("20.00")
        assert result.base_duration_minutes == 60

    def test_frequency_does_not_change_price(self):
        once = compute_pricing(BookingDraft(service_type="general", frequency="one-time"))
        weekly = compute_pricing(BookingDraft(service_type="general", frequency="weekly"))
        assert once == weekly


class TestExtras:
    def test_duration_text_times_quantity(self):
        draft = BookingDraft(service_type="general", selected_extras=[SelectedExtra(extra_id=1, quantity=2)])
        result = compute_pricing(draft, EXTRAS)
        assert result.extras_duration_minutes == 180
        assert result.extras_total == Decimal("50.00")

    def test_totals_combine_base_and_extras(self):
        draft = BookingDraft(
            service_type="general",
            duration=2,
            selected_extras=[SelectedExtra(extra_id=1), SelectedExtra(extra_id=2, quantity=3)],
        )
        result = compute_pricing(draft, EXTRAS)
        assert result.extras_total == Decimal("85.00")
        assert result.subtotal == Decimal("125.00")
        assert result.extras_duration_minutes == 90 + 135
        assert result.total_duration_minutes == 120 + 225

    def test_malformed_duration_contributes_price_only(self):
        draft = BookingDraft(service_type="general", selected_extras=[SelectedExtra(extra_id=3)])
        result = compute_pricing(draft, EXTRAS)
        assert result.extras_total == Decimal("10.00")
        assert result.extras_duration_minutes == 0

    def test_unknown_extra_uses_snapshot_price(self):
        draft = BookingDraft(
            service_type="general",
            selected_extras=[SelectedExtra(extra_id=99, quantity=2, unit_price=Decimal("7.50"))],
        )
        result = compute_pricing(draft, EXTRAS)
        assert result.extras_total == Decimal("15.00")
        assert result.extras_duration_minutes == 0

    def test_unknown_extra_without_snapshot_is_free(self):
        draft = BookingDraft(service_type="general", selected_extras=[SelectedExtra(extra_id=99)])
        assert compute_pricing(draft, EXTRAS).extras_total == 0


class TestParseDurationText:
    @pytest.mark.parametrize(
        "text, minutes",
        [
            ("1hr 30mins", 90),
            ("1hr", 60),
            ("2hrs", 120),
            ("45mins", 45),
            ("1hr:30mins", 90),
            ("", 0),
            (None, 0),
            ("about an hour", 0),
        ],
    )
    def test_parse(self, text, minutes):
        assert parse_duration_text(text) == minutes


class TestTips:
    def test_percentage_tip(self):
        draft = BookingDraft(service_type="general", duration=3, tip=TipSpec.percent(15))
        result = compute_pricing(draft)
        assert result.tip_amount == Decimal("9.00")
        assert result.total == Decimal("69.00")

    def test_unsupported_percentage_gives_no_tip(self):
        draft = BookingDraft(service_type="general", duration=3, tip=TipSpec.percent(12))
        assert compute_pricing(draft).tip_amount == 0

    def test_custom_tip_does_not_scale(self):
        small = compute_pricing(BookingDraft(service_type="general", duration=2, tip=TipSpec.custom("5")))
        large = compute_pricing(BookingDraft(service_type="general", duration=5, tip=TipSpec.custom("5")))
        assert small.subtotal != large.subtotal
        assert small.tip_amount == large.tip_amount == Decimal("5.00")

    def test_percentage_tip_scales_with_subtotal(self):
        small = compute_pricing(BookingDraft(service_type="general", duration=2, tip=TipSpec.percent(10)))
        large = compute_pricing(BookingDraft(service_type="general", duration=4, tip=TipSpec.percent(10)))
        assert large.tip_amount == small.tip_amount * 2

    @pytest.mark.parametrize("raw", ["abc", "", "-5", "NaN", "   "])
    def test_unusable_custom_tip_is_zero(self, raw):
        draft = BookingDraft(service_type="general", tip=TipSpec.custom(raw))
        assert compute_pricing(draft).tip_amount == 0

    def test_custom_tip_accepts_pound_sign(self):
        assert parse_amount("£7.50") == Decimal("7.50")

    def test_resolve_tip_without_tip(self):
        assert resolve_tip(None, Decimal("100")) == 0


class TestInvariants:
    DRAFTS = [
        BookingDraft(),
        BookingDraft(service_type="deep", **ALL_ROOMS_ZERO, tip=TipSpec.percent(20)),
        BookingDraft(service_type="airbnb", bedrooms=2, tip=TipSpec.custom("3.33")),
        BookingDraft(service_type="jet", selected_extras=[SelectedExtra(extra_id=4)]),
        BookingDraft(
            service_type="general",
            duration=4.5,
            tip=TipSpec.percent(15),
            selected_extras=[SelectedExtra(extra_id=2, quantity=2)],
        ),
    ]

    @pytest.mark.parametrize("draft", DRAFTS)
    def test_deterministic(self, draft):
        assert compute_pricing(draft, EXTRAS) == compute_pricing(draft, EXTRAS)

    @pytest.mark.parametrize("draft", DRAFTS)
    def test_ordering_and_non_negative(self, draft):
        result = compute_pricing(draft, EXTRAS)
        for amount in (result.base_price, result.extras_total, result.tip_amount, result.subtotal, result.total):
            assert amount >= 0
        assert result.total >= result.subtotal >= 0
        assert result.total == result.subtotal + result.tip_amount
        assert result.total_duration_minutes == result.base_duration_minutes + result.extras_duration_minutes
        if not result.quote_based:
            assert result.subtotal >= result.extras_total

    def test_as_strings_has_two_decimals(self):
        result = compute_pricing(BookingDraft(service_type="general", duration=2, tip=TipSpec.percent(15)))
        assert result.as_strings() == {
            "base_price": "40.00",
            "extras_total": "0.00",
            "tip_amount": "6.00",
            "subtotal": "40.00",
            "total_price": "46.00",
        }

    HUGE_DRAFTS = [
        BookingDraft(service_type="general", tip=TipSpec.custom("1e30")),
        BookingDraft(service_type="general", tip=TipSpec.custom("9" * 29)),
        BookingDraft(service_type="general", duration=1e30, tip=TipSpec.percent(15)),
        BookingDraft(service_type="airbnb", bedrooms=10**30),
        BookingDraft(service_type="deep", bedrooms=10**30, carpet_cleaning_areas=10**30),
        BookingDraft(service_type="general", selected_extras=[SelectedExtra(extra_id=1, quantity=10**30)]),
        BookingDraft(
            service_type="jet",
            selected_extras=[SelectedExtra(extra_id=99, unit_price=Decimal("1e40"))],
        ),
    ]

    @pytest.mark.parametrize("draft", HUGE_DRAFTS)
    def test_huge_inputs_do_not_raise(self, draft):
        result = compute_pricing(draft, EXTRAS)
        assert result.total >= result.subtotal > 0
        assert result.total.as_tuple().exponent == -2
        assert set(result.as_strings()) == {"base_price", "extras_total", "tip_amount", "subtotal", "total_price"}

    @pytest.mark.parametrize("raw", ["1e30", "9" * 29, "100000.01"])
    def test_implausible_custom_tip_is_zero(self, raw):
        draft = BookingDraft(service_type="general", duration=2, tip=TipSpec.custom(raw))
        result = compute_pricing(draft)
        assert result.tip_amount == 0
        assert result.total == Decimal("40.00")

    def test_huge_duration_is_priced_exactly(self):
        result = compute_pricing(BookingDraft(service_type="general", duration=1e30))
        assert result.base_price == Decimal("2e31")
        assert result.as_strings()["base_price"] == "2" + "0" * 31 + ".00"
