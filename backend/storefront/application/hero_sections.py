from typing import Any, Dict, List
from storefront.errors import NotFoundError, ValidationError
from storefront.extensions import db
from storefront.models.hero_section import HeroSection
from storefront.utils.transaction import transactional

DEFAULT_LIMIT = 2

# wire key -> model attribute
HERO_FIELDS = {
    "title": "title",
    "subtitle": "subtitle",
    "description": "description",
    "image": "image",
    "position": "position",
    "buttonText": "button_text",
    "buttonLink": "button_link",
    "status": "status",
}
REQUIRED_FIELDS = ("title", "subtitle", "image", "buttonText", "buttonLink")


def list_hero_sections(*, limit: int = DEFAULT_LIMIT) -> List[HeroSection]:
    return (
        HeroSection.query
        .order_by(HeroSection.position.asc(), HeroSection.created_at.asc())
        .limit(limit)
        .all()
    )


def get_hero_section(*, hero_id: str) -> HeroSection:
    hero = db.session.get(HeroSection, hero_id)
    if not hero:
        raise NotFoundError("Hero section not found")
    return hero


def create_hero_section(*, data: Dict[str, Any]) -> HeroSection:
    missing = [field for field in REQUIRED_FIELDS if not data.get(field)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    hero = HeroSection()
    for key, attr in HERO_FIELDS.items():
        if key in data:
            setattr(hero, attr, data[key])

    with transactional():
        db.session.add(hero)

    return hero


def update_hero_section(*, hero_id: str, data: Dict[str, Any]) -> HeroSection:
    hero = get_hero_section(hero_id=hero_id)

    cleared = [field for field in REQUIRED_FIELDS if field in data and not data[field]]
    if cleared:
        raise ValidationError(f"Required fields cannot be empty: {', '.join(cleared)}")

    with transactional():
        for key, attr in HERO_FIELDS.items():
            if key in data:
                setattr(hero, attr, data[key])

    return hero


def delete_hero_section(*, hero_id: str) -> None:
    hero = get_hero_section(hero_id=hero_id)

    with transactional():
        db.session.delete(hero)
