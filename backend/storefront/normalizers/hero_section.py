from .common import timestamps


def normalize_hero_section(hero):
    return {
        "id": hero.id,
        "title": hero.title,
        "subtitle": hero.subtitle,
        "description": hero.description,
        "image": hero.image,
        "position": hero.position,
        "buttonText": hero.button_text,
        "buttonLink": hero.button_link,
        "status": hero.status,
        **timestamps(hero),
    }
