from app.core.security import create_access_token
from app.models import User


def auth_headers(user: User) -> dict[str, str]:
    token = create_access_token(user.id, username=user.username, is_admin=user.is_admin)
    return {"Authorization": f"Bearer {token}"}


def recipe_payload(title: str = "Standard Recipe", **overrides) -> dict:
    payload = {
        "title": title,
        "description": "A reliable weeknight dish.",
        "instructions": "Mix.\n\nCook.",
        "prep_time_minutes": 10,
        "cook_time_minutes": 20,
        "servings": 2,
        "ingredients": [{"name": "Rice", "quantity": 2, "unit": "cups"}],
    }
    payload.update(overrides)
    return payload
