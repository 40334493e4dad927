"""Tests for hero patrol, cursor evasion and projectile flight."""

from game.duel.entities import Arena, Hero, Projectile
from game.duel.movement import move_hero, move_heroes, move_projectiles
from game.duel.state import SimulationState

ARENA = Arena()


def make_hero(**kwargs):
    fields = dict(index=0, x=100, y=300, color="red", facing=1, direction=1, moving_speed=2)
    fields.update(kwargs)
    return Hero(**fields)


# --- Patrol ---

def test_hero_moves_along_direction():
    hero = make_hero()
    move_hero(hero, ARENA, None)
    assert hero.y == 302
    assert hero.direction == 1


def test_hero_moves_up_with_negative_direction():
    hero = make_hero(direction=-1, moving_speed=5)
    move_hero(hero, ARENA, None)
    assert hero.y == 295
    assert hero.direction == -1


def test_x_never_changes():
    hero = make_hero()
    for _ in range(500):
        move_hero(hero, ARENA, None)
    assert hero.x == 100


# --- Boundary reflection ---

def test_reflects_at_top_edge():
    hero = make_hero(y=0, direction=-1)
    move_hero(hero, ARENA, None)
    assert hero.y == 0
    assert hero.direction == 1


def test_reflects_at_bottom_edge():
    hero = make_hero(y=599, direction=1, moving_speed=5)
    move_hero(hero, ARENA, None)
    assert hero.y == 600
    assert hero.direction == -1


def test_landing_exactly_on_edge_reflects():
    hero = make_hero(y=4, direction=-1, moving_speed=4)
    move_hero(hero, ARENA, None)
    assert hero.y == 0
    assert hero.direction == 1


def test_y_stays_in_field_over_many_ticks():
    hero = make_hero(moving_speed=7)
    for _ in range(1000):
        move_hero(hero, ARENA, None)
        assert 0 <= hero.y <= ARENA.height


# --- Evasion ---

def test_cursor_inside_buffer_inverts_before_moving():
    hero = make_hero(x=100, y=300, direction=1)
    move_hero(hero, ARENA, (110, 300))
    assert hero.direction == -1
    assert hero.y == 298


def test_cursor_outside_buffer_is_ignored():
    hero = make_hero(x=100, y=300, direction=1)
    move_hero(hero, ARENA, (200, 300))
    assert hero.direction == 1
    assert hero.y == 302


def test_cursor_exactly_at_buffer_is_ignored():
    hero = make_hero(x=100, y=300, direction=1)
    move_hero(hero, ARENA, (130, 300))
    assert hero.direction == 1


def test_undefined_cursor_skips_evasion():
    hero = make_hero(x=0, y=300)
    move_hero(hero, ARENA, None)
    assert hero.direction == 1


def test_evasion_oscillates_while_inside_buffer():
    hero = make_hero(x=100, y=300, direction=1)
    cursor = (110, 300)
    move_hero(hero, ARENA, cursor)
    assert (hero.y, hero.direction) == (298, -1)
    move_hero(hero, ARENA, cursor)
    assert (hero.y, hero.direction) == (300, 1)


def test_boundary_overrides_evasion_flip():
    hero = make_hero(x=100, y=1, direction=1)
    move_hero(hero, ARENA, (100, 5))
    # Evasion turned it upward, the clamp to 0 turned it back down
    assert hero.y == 0
    assert hero.direction == 1


def test_move_heroes_moves_every_hero():
    state = SimulationState()
    move_heroes(state, ARENA, None)
    assert [h.y for h in state.heroes] == [302, 302]


# --- Projectiles ---

def make_projectile(x, direction=1, owner=0):
    return Projectile(x=x, y=300, direction=direction, owner=owner, color="blue")


def test_projectile_advances_by_bullet_speed():
    state = SimulationState()
    state.projectiles = [make_projectile(115), make_projectile(685, direction=-1, owner=1)]
    move_projectiles(state, ARENA)
    assert [p.x for p in state.projectiles] == [120, 680]


def test_projectile_removed_past_right_edge():
    state = SimulationState()
    state.projectiles = [make_projectile(790)]
    move_projectiles(state, ARENA)
    assert state.projectiles[0].x == 795
    move_projectiles(state, ARENA)
    assert state.projectiles == []


def test_projectile_exactly_on_left_edge_is_removed():
    state = SimulationState()
    state.projectiles = [make_projectile(5, direction=-1, owner=1)]
    move_projectiles(state, ARENA)
    assert state.projectiles == []


def test_projectile_y_is_fixed():
    state = SimulationState()
    state.projectiles = [make_projectile(400)]
    for _ in range(10):
        move_projectiles(state, ARENA)
    assert state.projectiles[0].y == 300
    assert state.projectiles[0].x == 450
