import pytest
from pydantic import ValidationError as PydanticValidationError

from app.modules.onboarding.domain.models.onboarding_state import (
    BusinessType,
    OnboardingData,
    OnboardingStep,
    OnboardingWizard,
    WebsitePlan,
    can_advance,
)
from app.modules.user_management.domain.models.profile import Profile


class TestStepGates:
    """Required-field gates per step"""

    def test_profile_step_requires_name(self):
        """Whitespace-only names do not count"""
        assert can_advance(OnboardingStep.PROFILE, OnboardingData()) is False
        assert can_advance(OnboardingStep.PROFILE, OnboardingData(full_name="   ")) is False
        assert can_advance(OnboardingStep.PROFILE, OnboardingData(full_name="Ana")) is True

    def test_business_step_requires_type_and_name(self):
        """Both a known business type and a business name are needed"""
        assert can_advance(OnboardingStep.BUSINESS_INFO, OnboardingData(business_name="Smoke")) is False
        assert can_advance(OnboardingStep.BUSINESS_INFO, OnboardingData(business_type="lounge")) is False
        assert can_advance(
            OnboardingStep.BUSINESS_INFO,
            OnboardingData(business_type="lounge", business_name="Smoke")
        ) is True

    def test_business_step_rejects_unknown_type(self):
        """Business types outside the five variants fail the gate"""
        data = OnboardingData(business_type="bar", business_name="Smoke")
        assert can_advance(OnboardingStep.BUSINESS_INFO, data) is False

    @pytest.mark.parametrize("step", [
        OnboardingStep.SOCIAL_LINKS,
        OnboardingStep.IMAGES,
        OnboardingStep.WEBSITE_PLAN,
    ])
    def test_later_steps_never_block(self, step):
        assert can_advance(step, OnboardingData()) is True

    def test_out_of_range_step_is_closed(self):
        assert can_advance(6, OnboardingData(full_name="Ana")) is False


class TestNavigation:
    """Moving between steps"""

    def test_next_is_noop_when_gate_fails(self):
        """An empty name keeps the wizard on step 1"""
        wizard = OnboardingWizard()
        assert wizard.next() is False
        assert wizard.current_step == 1

    def test_walk_to_final_step(self):
        wizard = OnboardingWizard()
        wizard.update({"full_name": "Ana", "business_type": "lounge", "business_name": "Smoke"})

        for expected in (2, 3, 4, 5):
            assert wizard.next() is True
            assert wizard.current_step == expected

        assert wizard.is_final_step
        assert wizard.next() is False
        assert wizard.current_step == 5

    def test_back_stops_at_first_step(self):
        wizard = OnboardingWizard(current_step=2)
        assert wizard.back() is True
        assert wizard.back() is False
        assert wizard.current_step == 1

    def test_back_is_never_gated(self):
        """Going back works even when the current step's fields are empty"""
        wizard = OnboardingWizard(current_step=3)
        wizard.back()
        assert wizard.current_step == 2

    def test_skip_to_website_builder_from_any_step(self):
        """The shortcut bypasses the gates of steps 2 to 4"""
        wizard = OnboardingWizard()
        wizard.skip_to_website_builder()
        assert wizard.current_step == OnboardingStep.WEBSITE_PLAN
        assert wizard.step.title == "Website Builder"

    def test_step_cannot_leave_range(self):
        wizard = OnboardingWizard()
        with pytest.raises(PydanticValidationError):
            wizard.current_step = 6


class TestProgress:
    """Progress bar percentage"""

    @pytest.mark.parametrize("step,expected", [(1, 20.0), (2, 40.0), (3, 60.0), (4, 80.0), (5, 100.0)])
    def test_progress_tracks_step(self, step, expected):
        assert OnboardingWizard(current_step=step).progress == pytest.approx(expected)


class TestDataUpdates:
    """Field updates and prefill"""

    def test_update_changes_only_given_fields(self):
        wizard = OnboardingWizard()
        wizard.update({"full_name": "Ana", "phone": "555"})
        wizard.update({"phone": "777"})

        assert wizard.data.full_name == "Ana"
        assert wizard.data.phone == "777"

    def test_update_coerces_plan(self):
        """Plan ids from the client become WebsitePlan values"""
        wizard = OnboardingWizard()
        wizard.update({"selected_plan": "premium", "wants_website": True})
        assert wizard.data.selected_plan == WebsitePlan.PREMIUM

    def test_update_rejects_unknown_plan(self):
        wizard = OnboardingWizard()
        with pytest.raises(PydanticValidationError):
            wizard.update({"selected_plan": "enterprise"})

    def test_prefill_from_profile(self):
        """Name and avatar come from the caller's profile"""
        profile = Profile(id="p1", full_name="Ana Torres", avatar_url="https://cdn/avatar.png")
        wizard = OnboardingWizard.from_profile(profile)

        assert wizard.current_step == 1
        assert wizard.data.full_name == "Ana Torres"
        assert wizard.data.avatar_url == "https://cdn/avatar.png"
        assert wizard.can_proceed

    def test_prefill_without_profile(self):
        wizard = OnboardingWizard.from_profile(None)
        assert wizard.data.full_name == ""
        assert wizard.can_proceed is False


class TestBusinessType:
    """Business type parsing and labels"""

    def test_parse_known_value(self):
        assert BusinessType.parse(" mobile_lounge ") == BusinessType.MOBILE_LOUNGE

    @pytest.mark.parametrize("value", [None, "", "bar", "LOUNGE"])
    def test_parse_unknown_value(self, value):
        assert BusinessType.parse(value) is None

    def test_every_variant_has_label(self):
        assert [bt.label for bt in BusinessType] == [
            "Cigar Lounge",
            "Mobile Lounge",
            "Cigar Manufacturer",
            "Accessory Company",
            "Cigar Organization",
        ]
