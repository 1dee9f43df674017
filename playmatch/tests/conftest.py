import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest

# Add the project root to sys.path so that "playmatch" can be imported
# without installing the package
current_dir = Path(__file__).parent.absolute()
root_dir = current_dir.parent.parent
sys.path.insert(0, str(root_dir))


# 2024-01-01T00:00:00Z
JAN_1_2024_MS = 1704067200000


def build_profile(
    user_id: str,
    game_ids: List[str],
    slots: Optional[List[Tuple[str, int, int]]] = None
) -> Dict[str, Any]:
    """Profile dict with one library entry per game id and (date, start, end) slots."""
    availability: Dict[str, List[Dict[str, int]]] = {}
    for date, start, end in slots or []:
        availability.setdefault(date, []).append({"start": start, "end": end})

    return {
        "id": user_id,
        "game_library": [
            {"game_id": g, "game_name": f"Game {g}", "expertise_level": "beginner"}
            for g in game_ids
        ],
        "availability": [
            {"date": date, "intervals": intervals}
            for date, intervals in sorted(availability.items())
        ],
    }


def build_interaction(user_id: str, interaction_type: str, session_id: str = "s1") -> Dict[str, Any]:
    return {
        "user_id": user_id,
        "session_id": session_id,
        "interaction_type": interaction_type,
        "created_at": JAN_1_2024_MS,
    }


@pytest.fixture
def make_profile():
    return build_profile


@pytest.fixture
def make_interaction():
    return build_interaction
