from chunkrunner.controls import Key, KeyStates
from chunkrunner.enemy import Enemy
from chunkrunner.geometry import CollisionSide, Vector2f
from chunkrunner.player import Player

STEP = 0.01


class _Terrain:
    def __init__(self, side=CollisionSide.NONE):
        self.side = side
        self.queries = []

    def colliding_with_terrain(self, rect):
        self.queries.append(rect)
        return self.side


def _player(x=50, y=50):
    return Player(Vector2f(x, y), None, 30, 46)


def test_falls_without_ground():
    player = _player()
    player.update(STEP, KeyStates(), _Terrain(), [])
    assert player.y > 50
    assert player.vy > 0
    assert player.on_ground is False
    assert player.score == 1


def test_terrain_is_queried_with_player_box():
    player = _player()
    terrain = _Terrain()
    player.update(STEP, KeyStates(), terrain, [])
    assert len(terrain.queries) == 1
    assert terrain.queries[0] == player.bounds()


def test_moves_right_and_left():
    right = _player()
    right.update(STEP, KeyStates([Key.D]), _Terrain(), [])
    left = _player()
    left.update(STEP, KeyStates([Key.A]), _Terrain(), [])
    assert right.x > 50 and right.vx > 0
    assert left.x < 50 and left.vx < 0


def test_horizontal_speed_never_exceeds_max():
    player = _player()
    speeds = []
    for _ in range(200):
        player.update(STEP, KeyStates([Key.D]), _Terrain(), [])
        speeds.append(player.vx)
    assert max(speeds) == 200.0
    assert all(abs(speed) <= 200.0 for speed in speeds)


def test_fall_speed_is_capped():
    player = _player()
    for _ in range(200):
        player.update(STEP, KeyStates(), _Terrain(), [])
    assert player.vy == 500.0


def test_jump_from_ground():
    player = _player()
    player.update(STEP, KeyStates([Key.SPACE]), _Terrain(), [])
    assert player.vy == -500.0
    assert player.y < 50
    assert player.on_ground is False


def test_no_jump_in_the_air():
    player = _player()
    player.on_ground = False
    player.update(STEP, KeyStates([Key.SPACE]), _Terrain(), [])
    assert player.vy > 0


def test_reset_key_returns_to_spawn():
    player = _player(300, 400)
    player.vx = 150.0
    player.score = 42
    player.update(STEP, KeyStates([Key.R]), _Terrain(), [])
    assert player.pos == Vector2f(50, 50)
    assert player.velocity == Vector2f(0, 0)
    assert player.score == 1


def test_score_counts_updates():
    player = _player()
    for _ in range(3):
        player.update(STEP, KeyStates(), _Terrain(), [])
    assert player.score == 3


def test_lands_on_terrain_bottom():
    player = _player()
    player.update(STEP, KeyStates(), _Terrain(CollisionSide.BOTTOM), [])
    assert (player.y + player.height) % 32 == 0
    assert player.vy == 0
    assert player.on_ground is True


def test_hits_ceiling():
    player = _player()
    player.update(STEP, KeyStates(), _Terrain(CollisionSide.TOP), [])
    assert player.y % 32 == 0
    assert player.vy == 0
    assert player.on_ground is False


def test_side_snaps():
    left = _player()
    left.update(STEP, KeyStates([Key.D]), _Terrain(CollisionSide.LEFT), [])
    assert (left.x + left.width) % 32 == 0
    assert left.vx == 0
    right = _player()
    right.update(STEP, KeyStates([Key.A]), _Terrain(CollisionSide.RIGHT), [])
    assert right.x % 32 == 0
    assert right.vx == 0


def test_bottom_and_left_both_apply():
    player = _player()
    player.update(STEP, KeyStates(), _Terrain(CollisionSide.BOTTOM | CollisionSide.LEFT), [])
    assert (player.y + player.height) % 32 == 0
    assert (player.x + player.width) % 32 == 0
    assert player.on_ground is True


def test_stands_on_enemy():
    enemy = Enemy(Vector2f(100, 200), None, 30, 46)
    player = _player(100, 200 - 46 + 2)
    player.on_ground = False
    player.update(STEP, KeyStates(), _Terrain(), [enemy])
    assert player.y == enemy.y - player.height
    assert player.vy == 0
    assert player.on_ground is True


def test_pushed_out_left_of_enemy():
    enemy = Enemy(Vector2f(100, 200), None, 30, 46)
    player = _player(100 - 30 + 1, 200)
    player.update(STEP, KeyStates(), _Terrain(), [enemy])
    assert player.x == enemy.x - player.width
    assert player.vx == 0