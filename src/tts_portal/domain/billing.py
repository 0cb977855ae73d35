"""Plans and usage domain models."""

from dataclasses import dataclass

from tts_portal.domain.models import UserProfile

UNLIMITED = -1


@dataclass(frozen=True)
class Plan:
    """A subscription tier shown on the pricing page."""

    key: str
    name: str
    price: int
    description: str
    features: tuple[str, ...]
    highlight: bool = False

    @classmethod
    def from_payload(cls, payload: dict[str, object]) -> "Plan | None":
        """Parse a plan entry; entries without a key, plan or id are skipped."""
        raw_key = payload.get("key") or payload.get("plan") or payload.get("id")
        if not raw_key:
            return None
        key = str(raw_key)
        raw_features = payload.get("features") or ()
        features = (
            tuple(str(item) for item in raw_features)
            if isinstance(raw_features, list | tuple)
            else ()
        )
        raw_price = payload.get("price") or 0
        return cls(
            key=key,
            name=str(payload.get("name") or key.title()),
            price=int(raw_price) if isinstance(raw_price, int | float) else 0,
            description=str(payload.get("description") or ""),
            features=features,
            highlight=bool(payload.get("highlight", False)),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "key": self.key,
            "name": self.name,
            "price": self.price,
            "price_label": format_price(self.price),
            "description": self.description,
            "features": list(self.features),
            "highlight": self.highlight,
        }


DEFAULT_PLANS: tuple[Plan, ...] = (
    Plan(
        key="free",
        name="Free",
        price=0,
        description="Perfect for trying out",
        features=(
            "10,000 characters/month",
            "50 generations/month",
            "Basic voices",
            "Standard quality",
        ),
    ),
    Plan(
        key="starter",
        name="Starter",
        price=9900,
        description="For content creators",
        features=(
            "100,000 characters/month",
            "500 generations/month",
            "Premium voices",
            "High quality audio",
            "Priority support",
        ),
    ),
    Plan(
        key="pro",
        name="Pro",
        price=29900,
        description="For professionals",
        features=(
            "500,000 characters/month",
            "2,000 generations/month",
            "All premium voices",
            "Custom voice cloning",
            "API access",
            "24/7 support",
        ),
        highlight=True,
    ),
    Plan(
        key="enterprise",
        name="Enterprise",
        price=99900,
        description="For large teams",
        features=(
            "Unlimited characters",
            "Unlimited generations",
            "All voices + custom",
            "Dedicated support",
            "SLA guarantee",
            "Custom integrations",
        ),
    ),
)


def format_price(price: int) -> str:
    """Format a monthly KRW price for display."""
    if price == 0:
        return "Free"
    return f"{price:,} KRW/mo"


@dataclass(frozen=True)
class UsageMeter:
    """Usage against a limit, where ``-1`` means unlimited."""

    used: int
    limit: int

    @property
    def unlimited(self) -> bool:
        return self.limit == UNLIMITED

    @property
    def percent(self) -> float:
        if self.limit <= 0:
            return 0.0
        return min(self.used / self.limit * 100, 100.0)

    @property
    def level(self) -> str:
        percent = self.percent
        if percent > 90:
            return "critical"
        if percent > 70:
            return "warning"
        return "normal"

    @property
    def display(self) -> str:
        limit = "Unlimited" if self.unlimited else f"{self.limit:,}"
        return f"{self.used:,} / {limit}"

    def to_dict(self) -> dict[str, object]:
        return {
            "used": self.used,
            "limit": self.limit,
            "unlimited": self.unlimited,
            "percent": round(self.percent, 1),
            "level": self.level,
            "display": self.display,
        }


@dataclass(frozen=True)
class DashboardSnapshot:
    """Plan and usage view for the signed-in user."""

    user: UserProfile | None
    plan: str
    characters: UsageMeter
    generations: UsageMeter

    @property
    def can_upgrade(self) -> bool:
        return self.plan == "free"

    def to_dict(self) -> dict[str, object]:
        return {
            "user": self.user.to_payload() if self.user else None,
            "plan": self.plan,
            "can_upgrade": self.can_upgrade,
            "characters": self.characters.to_dict(),
            "generations": self.generations.to_dict(),
        }
