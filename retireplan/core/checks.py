"""Non-fatal consistency checks on user input."""

from __future__ import annotations

from typing import List

from retireplan.models import UserProfile


def profile_warnings(profile: UserProfile) -> List[str]:
    warnings: List[str] = []
    if profile.current_age >= profile.retirement_age:
        warnings.append(
            f"retirement age {profile.retirement_age} is not after current age {profile.current_age}"
        )
    if profile.retirement_age >= profile.death_age:
        warnings.append(
            f"life expectancy {profile.death_age} is not after retirement age {profile.retirement_age}"
        )
    if profile.current_income < 0:
        warnings.append("current income is negative")
    return warnings
