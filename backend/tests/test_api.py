"""
API Tests

Tests for the FastAPI endpoints:
- Session CRUD
- Engine moves
- Opponent and forced moves
"""

from fastapi.testclient import TestClient

from netgame.api.main import app


# =============================================================================
# Test Client
# =============================================================================

client = TestClient(app)


def create_game(**body) -> dict:
    response = client.post("/api/games/", json=body)
    assert response.status_code == 200
    return response.json()


# =============================================================================
# Root Endpoint Tests
# =============================================================================

def test_root_endpoint():
    """Test root endpoint returns welcome message"""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "Network" in data["message"]
    assert data["sessions"] == "/api/games"
    print("✓ Root endpoint works")


def test_health_check():
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert isinstance(data["sessions"], int)
    print("✓ Health check works")


# =============================================================================
# Session Endpoint Tests
# =============================================================================

def test_create_game():
    """Test creating a new session"""
    data = create_game(side="white", search_depth=1)

    assert "game_id" in data
    assert data["engine_side"] == "white"
    assert data["chip_counts"] == {"black": 0, "white": 0}
    assert data["winner"] is None
    assert len(data["grid"]) == 8
    assert all(cell == "empty" for row in data["grid"] for cell in row)
    assert data["valid_move_count"] == 48
    print(f"✓ Game created with ID: {data['game_id'][:8]}...")


def test_create_game_rejects_bad_depth():
    """Test request validation on the search depth"""
    response = client.post("/api/games/", json={"search_depth": 9})
    assert response.status_code == 422
    print("✓ Bad depth rejected")


def test_list_games():
    """Test listing sessions"""
    game_id = create_game()["game_id"]

    response = client.get("/api/games/")
    assert response.status_code == 200
    data = response.json()
    assert isinstance(data, list)
    assert game_id in data
    print(f"✓ Listed {len(data)} games")


def test_get_game():
    """Test getting a specific session"""
    game_id = create_game(side="black")["game_id"]

    response = client.get(f"/api/games/{game_id}")
    assert response.status_code == 200
    data = response.json()
    assert data["game_id"] == game_id
    assert data["engine_side"] == "black"
    print("✓ Get game works")


def test_get_nonexistent_game():
    """Test getting a session that doesn't exist"""
    response = client.get("/api/games/nonexistent-id")
    assert response.status_code == 404
    assert response.json()["error"] == "Game not found"
    print("✓ Nonexistent game returns 404")


def test_delete_game():
    """Test deleting a session"""
    game_id = create_game()["game_id"]

    response = client.delete(f"/api/games/{game_id}")
    assert response.status_code == 200
    assert response.json() == {"deleted": game_id}

    get_response = client.get(f"/api/games/{game_id}")
    assert get_response.status_code == 404
    print("✓ Delete game works")


# =============================================================================
# Move Endpoint Tests
# =============================================================================

def test_engine_opening_move():
    """Test the engine's first move as white lands in the center"""
    game_id = create_game(side="white", search_depth=3, seed=7)["game_id"]

    response = client.post(f"/api/games/{game_id}/choose")
    assert response.status_code == 200
    data = response.json()
    assert data["move"]["kind"] == "add"
    assert (data["move"]["x1"], data["move"]["y1"]) in [(3, 3), (3, 4), (4, 3), (4, 4)]
    assert data["stats"]["opening"] is True
    assert data["notation"].startswith("[add to ")

    state = client.get(f"/api/games/{game_id}").json()
    assert state["chip_counts"]["white"] == 1
    print(f"✓ Engine opened with {data['notation']}")


def test_opponent_then_engine_reply():
    """Test reporting the opponent's move and getting a reply"""
    game_id = create_game(side="black", search_depth=1)["game_id"]

    response = client.post(f"/api/games/{game_id}/opponent",
                           json={"kind": "add", "x1": 3, "y1": 3})
    assert response.status_code == 200
    assert response.json()["grid"][3][3] == "white"

    response = client.post(f"/api/games/{game_id}/choose")
    assert response.status_code == 200
    data = response.json()
    assert data["move"]["kind"] == "add"
    assert data["stats"]["depth_used"] == 1
    assert isinstance(data["stats"]["best_score"], float)

    state = client.get(f"/api/games/{game_id}").json()
    assert state["chip_counts"] == {"black": 1, "white": 1}
    print("✓ Engine replied to opponent move")


def test_illegal_opponent_move():
    """Test the opponent may not play into the engine's goal"""
    game_id = create_game(side="black")["game_id"]

    response = client.post(f"/api/games/{game_id}/opponent",
                           json={"kind": "add", "x1": 3, "y1": 0})
    assert response.status_code == 400
    assert "Illegal move" in response.json()["error"]

    state = client.get(f"/api/games/{game_id}").json()
    assert state["chip_counts"]["white"] == 0
    print("✓ Illegal opponent move rejected")


def test_malformed_move():
    """Test a move body that cannot be read"""
    game_id = create_game()["game_id"]

    response = client.post(f"/api/games/{game_id}/opponent", json={"kind": "jump"})
    assert response.status_code == 400
    assert "Malformed move" in response.json()["error"]

    response = client.post(f"/api/games/{game_id}/opponent", json={"kind": "add"})
    assert response.status_code == 400
    print("✓ Malformed move rejected")


def test_force_move():
    """Test recording a move for the engine's own side"""
    game_id = create_game(side="black")["game_id"]

    response = client.post(f"/api/games/{game_id}/force",
                           json={"kind": "add", "x1": 3, "y1": 0})
    assert response.status_code == 200
    assert response.json()["grid"][0][3] == "black"

    response = client.post(f"/api/games/{game_id}/force",
                           json={"kind": "add", "x1": 0, "y1": 3})
    assert response.status_code == 400
    print("✓ Force move works")


def test_move_on_missing_game():
    """Test moves against an unknown session"""
    response = client.post("/api/games/nonexistent-id/choose")
    assert response.status_code == 404

    response = client.post("/api/games/nonexistent-id/opponent",
                           json={"kind": "add", "x1": 3, "y1": 3})
    assert response.status_code == 404
    print("✓ Moves on missing game return 404")
