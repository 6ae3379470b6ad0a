from .common import timestamps


def normalize_homepage_content(section):
    return {
        "id": section.id,
        "sectionName": section.section_name,
        "sectionDisplayName": section.section_display_name,
        "elements": list(section.elements or []),
        "isActive": section.is_active,
        **timestamps(section),
    }
