import copy
from typing import Any, Dict, List, Optional

from sqlalchemy.orm.attributes import flag_modified

from storefront.domain.invariants.exceptions import InvariantViolation
from storefront.errors import NotFoundError
from storefront.extensions import db
from storefront.models.base import new_id
from storefront.models.homepage_content import ELEMENT_METADATA_KEYS, ELEMENT_TYPES, HomepageContent
from storefront.utils.request_data import coerce_bool
from storefront.utils.transaction import transactional

DEFAULT_SECTIONS = [
    {
        "sectionName": "hero",
        "sectionDisplayName": "Hero Section",
        "elements": [
            {"type": "text", "key": "title", "value": "Luxury Fashion Redefined", "metadata": {"className": "hero-title"}},
            {"type": "text", "key": "subtitle", "value": "Discover premium pre-loved luxury items", "metadata": {"className": "hero-subtitle"}},
            {"type": "button", "key": "cta", "value": "Shop Now", "metadata": {"href": "/collections", "className": "hero-button"}},
        ],
    },
    {
        "sectionName": "categories",
        "sectionDisplayName": "Category Showcase",
        "elements": [
            {"type": "text", "key": "title", "value": "Shop by Category", "metadata": {"className": "section-title"}},
            {"type": "text", "key": "subtitle", "value": "Explore our curated collections", "metadata": {"className": "section-subtitle"}},
        ],
    },
    {
        "sectionName": "brands",
        "sectionDisplayName": "Featured Brands",
        "elements": [
            {"type": "text", "key": "title", "value": "Premium Brands", "metadata": {"className": "section-title"}},
            {"type": "text", "key": "description", "value": "Authentic luxury brands you love", "metadata": {"className": "section-description"}},
        ],
    },
    {
        "sectionName": "about",
        "sectionDisplayName": "About Section",
        "elements": [
            {"type": "text", "key": "title", "value": "Why Choose Tangerine Luxury?", "metadata": {"className": "about-title"}},
            {"type": "text", "key": "description", "value": "We provide authenticated pre-loved luxury items with guaranteed quality.", "metadata": {"className": "about-description"}},
            {"type": "image", "key": "banner", "value": "/images/about-banner.jpg", "metadata": {"alt": "About Tangerine Luxury"}},
        ],
    },
]


def build_element(data: Dict[str, Any], element_id: Optional[str] = None) -> Dict[str, Any]:
    """Validate an element payload and give it an id."""
    element_type = data.get("type")
    if element_type not in ELEMENT_TYPES:
        raise InvariantViolation(
            f"Invalid element type '{element_type}'. Allowed: {', '.join(sorted(ELEMENT_TYPES))}"
        )
    if not data.get("key"):
        raise InvariantViolation("Element key is required")
    if data.get("value") is None:
        raise InvariantViolation("Element value is required")

    metadata = data.get("metadata") or {}
    return {
        "id": element_id or data.get("id") or data.get("_id") or new_id(),
        "type": element_type,
        "key": data["key"],
        "value": data["value"],
        "metadata": {key: metadata[key] for key in ELEMENT_METADATA_KEYS if key in metadata},
    }


def list_sections() -> List[HomepageContent]:
    return HomepageContent.query.order_by(HomepageContent.section_name.asc()).all()


def get_section(*, section_name: str) -> HomepageContent:
    section = HomepageContent.query.filter_by(section_name=section_name).first()
    if not section:
        raise NotFoundError("Section not found")
    return section


def _get_or_create(section_name: str, display_name: Optional[str] = None) -> HomepageContent:
    section = HomepageContent.query.filter_by(section_name=section_name).first()
    if section is None:
        section = HomepageContent(
            section_name=section_name,
            section_display_name=display_name or section_name.replace("-", " ").title(),
            elements=[],
        )
        db.session.add(section)
    return section


def upsert_section(*, section_name: str, data: Dict[str, Any]) -> HomepageContent:
    with transactional():
        section = _get_or_create(section_name, data.get("sectionDisplayName"))

        if data.get("sectionDisplayName"):
            section.section_display_name = data["sectionDisplayName"]
        if "elements" in data:
            section.elements = [build_element(element) for element in data["elements"] or []]
        if "isActive" in data:
            section.is_active = coerce_bool(data["isActive"], "isActive")

    return section


def add_element(*, section_name: str, data: Dict[str, Any]) -> HomepageContent:
    element = build_element(data, element_id=new_id())

    with transactional():
        section = _get_or_create(section_name)
        section.elements = list(section.elements or []) + [element]
        flag_modified(section, "elements")

    return section


def update_element(*, section_name: str, element_id: str, data: Dict[str, Any]) -> HomepageContent:
    section = get_section(section_name=section_name)
    elements = copy.deepcopy(section.elements or [])

    for index, element in enumerate(elements):
        if element.get("id") == element_id:
            elements[index] = build_element(data, element_id=element_id)
            break
    else:
        raise NotFoundError("Section or element not found")

    with transactional():
        section.elements = elements
        flag_modified(section, "elements")

    return section


def delete_element(*, section_name: str, element_id: str) -> HomepageContent:
    section = get_section(section_name=section_name)

    with transactional():
        section.elements = [e for e in section.elements or [] if e.get("id") != element_id]
        flag_modified(section, "elements")

    return section


def initialize_defaults() -> List[HomepageContent]:
    """Upsert the default sections, replacing their elements."""
    for default in DEFAULT_SECTIONS:
        upsert_section(section_name=default["sectionName"], data=copy.deepcopy(default))

    return list_sections()
