"""
Tests for the transition resolver.

Tests:
- Movement, inventory and health effects
- Forced death override
- Effect ordering
- Ownership checks and change descriptions
"""

import pytest

from ..scene_schema import Link
from ..engine_core.state import PlayerState
from ..engine_core.resolver import Resolver, InvalidLinkOwnership, resolve


def _link(graph, scene_id, text):
    """Find a link in a scene by its text."""
    for link in graph.scene(scene_id).links:
        if link.text == text:
            return link
    raise LookupError(text)


class TestNewtonScenarios:
    """Walkthroughs of the bundled adventure."""

    def test_pick_up_sword(self, newton_graph, start_state):
        """Picking up the sword adds it and stays in place."""
        link = _link(newton_graph, "start", "Pick up sword")
        new_state = resolve(start_state, link)

        assert new_state == PlayerState(scene_id="start", health=10, inventory=frozenset({"sword"}))

    def test_go_east(self, newton_graph, start_state):
        """Following a target moves without touching health or inventory."""
        link = _link(newton_graph, "start", "East")
        new_state = resolve(start_state, link)

        assert new_state.scene_id == "road"
        assert new_state.health == 10
        assert new_state.inventory == frozenset()

    def test_petting_snake_until_death(self, newton_graph, road_state):
        """Damage without a target still sends the player to the graveyard at 0."""
        link = _link(newton_graph, "road", "Pet snake")
        assert link.target is None

        state = road_state
        healths = []
        scenes = []
        for _ in range(4):
            state = resolve(state, link, newton_graph.death_scene_id)
            healths.append(state.health)
            scenes.append(state.scene_id)

        assert healths == [7, 4, 1, 0]
        assert scenes == ["road", "road", "road", "graveyard"]

    def test_chop_snake(self, newton_graph, armed_road_state):
        """Chopping the snake with the sword reaches the dead-snake scene."""
        link = _link(newton_graph, "road", "Chop snake")
        new_state = resolve(armed_road_state, link)

        assert new_state.scene_id == "roaddeadsnake"
        assert new_state.inventory == frozenset({"sword"})
        assert newton_graph.scene("roaddeadsnake").is_terminal


class TestHealth:
    """Tests for damage and healing."""

    def test_health_never_negative(self):
        """Overkill damage floors at zero."""
        state = PlayerState(scene_id="start", health=3)
        new_state = resolve(state, Link(text="Fall", damage=50))
        assert new_state.health == 0

    @pytest.mark.parametrize("damages", [[1, 2, 3, 4, 5], [9, 9], [0, 10, 1], [-3, 20, 2]])
    def test_health_floor_over_sequences(self, damages):
        """No sequence of damage drives health below zero."""
        state = PlayerState(scene_id="start", health=10)
        for damage in damages:
            state = resolve(state, Link(text="Hit", damage=damage))
            assert state.health >= 0

    def test_negative_damage_heals_without_cap(self):
        """Healing can exceed the starting health."""
        state = PlayerState(scene_id="start", health=10)
        new_state = resolve(state, Link(text="Drink", damage=-5))
        assert new_state.health == 15
        assert new_state.scene_id == "start"

    def test_zero_damage_is_a_no_op(self):
        """Zero damage leaves health unchanged."""
        state = PlayerState(scene_id="start", health=4)
        assert resolve(state, Link(text="Graze", damage=0)).health == 4


class TestForcedDeath:
    """Tests for the death override."""

    def test_death_overrides_target(self):
        """A lethal link with a target still ends in the death scene."""
        state = PlayerState(scene_id="start", health=2)
        new_state = resolve(state, Link(text="Leap", damage=2, target="hall"), "graveyard")
        assert new_state.scene_id == "graveyard"
        assert new_state.health == 0

    def test_custom_death_scene(self):
        """The death scene id is whatever the caller passes."""
        state = PlayerState(scene_id="start", health=1)
        new_state = resolve(state, Link(text="Trip", damage=1), "crypt")
        assert new_state.scene_id == "crypt"

    def test_survivor_follows_target(self):
        """Surviving damage moves to the target as usual."""
        state = PlayerState(scene_id="start", health=5)
        new_state = resolve(state, Link(text="Leap", damage=4, target="hall"), "graveyard")
        assert new_state.scene_id == "hall"
        assert new_state.health == 1


class TestInventory:
    """Tests for inventory effects."""

    def test_gain_held_item_is_idempotent(self):
        """Gaining an item already held changes nothing."""
        state = PlayerState(scene_id="start", inventory=frozenset({"sword"}))
        assert resolve(state, Link(text="Take", gain="sword")).inventory == frozenset({"sword"})

    def test_lose_missing_item_is_idempotent(self):
        """Losing an item not held changes nothing."""
        state = PlayerState(scene_id="start", inventory=frozenset({"sword"}))
        assert resolve(state, Link(text="Drop", lose="key")).inventory == frozenset({"sword"})

    def test_gain_applies_before_lose(self):
        """A link that gains and loses the same item ends without it."""
        state = PlayerState(scene_id="start")
        new_state = resolve(state, Link(text="Juggle", gain="ball", lose="ball"))
        assert new_state.inventory == frozenset()

    def test_swap(self):
        """Gain and lose of different items both apply."""
        state = PlayerState(scene_id="start", inventory=frozenset({"key"}))
        new_state = resolve(state, Link(text="Swap", gain="lamp", lose="key"))
        assert new_state.inventory == frozenset({"lamp"})


class TestPurity:
    """The resolver never mutates its input."""

    def test_input_state_unchanged(self):
        """Resolving returns a new state and leaves the old one alone."""
        state = PlayerState(scene_id="start", health=10, inventory=frozenset({"key"}))
        resolve(state, Link(text="Everything", gain="lamp", lose="key", damage=3, target="hall"))
        assert state == PlayerState(scene_id="start", health=10, inventory=frozenset({"key"}))

    def test_deterministic(self):
        """Same input, same output."""
        state = PlayerState(scene_id="start", health=6)
        link = Link(text="Hit", damage=2, gain="bruise", target="hall")
        assert resolve(state, link) == resolve(state, link)


class TestResolver:
    """Tests for the graph-bound Resolver."""

    def test_rejects_foreign_link(self, guard_graph):
        """A link from another scene raises InvalidLinkOwnership."""
        resolver = Resolver(graph=guard_graph, check_ownership=True)
        state = PlayerState(scene_id="hall")
        foreign = guard_graph.scene("start").links[2]

        with pytest.raises(InvalidLinkOwnership) as exc_info:
            resolver.resolve(state, foreign)
        assert exc_info.value.scene_id == "hall"

    def test_ownership_check_can_be_disabled(self, guard_graph):
        """With checks off the link is resolved anyway."""
        resolver = Resolver(graph=guard_graph, check_ownership=False)
        state = PlayerState(scene_id="hall", health=10)
        foreign = guard_graph.scene("start").links[2]

        assert resolver.resolve(state, foreign).health == 15

    def test_apply_describes_changes(self, guard_graph):
        """apply() lists the effects in resolution order."""
        resolver = Resolver(graph=guard_graph)
        state = PlayerState(scene_id="start", health=10, inventory=frozenset({"key"}))
        link = guard_graph.scene("start").links[1]  # Open door

        result = resolver.apply(state, link)

        assert result.new_state.scene_id == "hall"
        assert result.changes == ["Lost key", "Moved to hall"]
        assert not result.died

    def test_apply_reports_death(self, guard_graph):
        """A lethal link is flagged as a death."""
        resolver = Resolver(graph=guard_graph)
        state = PlayerState(scene_id="start", health=10)
        link = guard_graph.scene("start").links[5]  # Leap

        result = resolver.apply(state, link)

        assert result.died
        assert result.new_state.scene_id == "graveyard"
        assert result.changes == ["Took 100 damage", "Moved to graveyard"]

    def test_apply_describes_healing(self, guard_graph):
        """Healing is reported as recovered health."""
        resolver = Resolver(graph=guard_graph)
        state = PlayerState(scene_id="start", health=3)

        result = resolver.apply(state, guard_graph.scene("start").links[2])
        assert result.changes == ["Recovered 5 health"]

    def test_apply_reports_full_damage_when_clamped(self, newton_graph):
        """Damage is reported as dealt even when health floors at zero."""
        resolver = Resolver(graph=newton_graph)
        state = PlayerState(scene_id="road", health=1)

        result = resolver.apply(state, newton_graph.scene("road").links[0])  # Pet snake

        assert result.died
        assert result.new_state.health == 0
        assert result.changes == ["Took 3 damage", "Moved to graveyard"]
