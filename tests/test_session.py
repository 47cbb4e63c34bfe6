"""Tests for the session builder."""

from __future__ import annotations

import pytest

from kinetic.studio.models import DEFAULT_BLOCK_MET, BlockMode, BlockType, StudioNode
from kinetic.studio.session import (
    add_node,
    block_met,
    delete_node,
    move_node,
    new_node,
    session_totals,
    update_node,
)


class TestNewNode:
    """Tests for block defaults."""

    def test_strength_tracks_reps(self, studio_config):
        node = new_node(BlockType.STRENGTH, config=studio_config)
        assert node.mode == BlockMode.REPS
        assert node.label == "Strength Set"
        assert node.duration == 10
        assert (node.sets, node.reps) == (3, 10)
        assert node.id.startswith("node-")

    def test_warmup_runs_on_timer(self, studio_config):
        node = new_node("warmup", config=studio_config)
        assert node.kind == BlockType.WARMUP
        assert node.mode == BlockMode.TIMER

    def test_ids_are_unique(self, studio_config):
        ids = {new_node("skill", config=studio_config).id for _ in range(20)}
        assert len(ids) == 20

    def test_config_defaults(self, studio_config):
        studio_config.block_duration = 15
        studio_config.sets = 5
        node = new_node(BlockType.SKILL, config=studio_config)
        assert node.duration == 15
        assert node.sets == 5

    def test_defaults_without_config_ignore_user_file(self, tmp_path, monkeypatch):
        config_dir = tmp_path / ".kinetic"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("studio: 5\n")
        monkeypatch.setenv("HOME", str(tmp_path))

        nodes = add_node((), "warmup")
        assert nodes[0].duration == 10
        assert nodes[0].mode == BlockMode.TIMER

    def test_unknown_kind(self, studio_config):
        with pytest.raises(ValueError):
            new_node("stretch", config=studio_config)

    def test_model_rejects_zero_duration(self):
        with pytest.raises(ValueError):
            StudioNode(id="x", kind=BlockType.WARMUP, label="x", duration=0)


class TestEditing:
    """Tests for add, update and delete."""

    def test_add_appends(self, full_session, studio_config):
        nodes = add_node(full_session, BlockType.COOLDOWN, config=studio_config)
        assert len(nodes) == 5
        assert nodes[:4] == full_session
        assert nodes[-1].kind == BlockType.COOLDOWN

    def test_update_fields(self, full_session):
        nodes = update_node(full_session, "node-skill", label="Handstand", notes="Wall", reps=5)
        node = nodes[2]
        assert node.label == "Handstand"
        assert node.notes == "Wall"
        assert node.reps == 5
        assert nodes[0] == full_session[0]

    @pytest.mark.parametrize("value", [0, -3, None])
    def test_update_clamps_to_one(self, full_session, value):
        nodes = update_node(full_session, "node-strength", duration=value, sets=value, reps=value)
        assert nodes[1].duration == 1
        assert nodes[1].sets == 1
        assert nodes[1].reps == 1

    def test_update_mode(self, full_session):
        nodes = update_node(full_session, "node-warmup", mode="reps")
        assert nodes[0].mode == BlockMode.REPS

    def test_update_unknown_field(self, full_session):
        with pytest.raises(ValueError):
            update_node(full_session, "node-warmup", kind="skill")

    def test_update_unknown_id(self, full_session):
        assert update_node(full_session, "node-missing", duration=30) == full_session

    def test_delete(self, full_session):
        nodes = delete_node(full_session, "node-strength")
        assert [node.id for node in nodes] == ["node-warmup", "node-skill", "node-cooldown"]


class TestMoveNode:
    """Tests for reordering."""

    def test_move_down_then_up(self, full_session):
        moved = move_node(full_session, 0, 1)
        assert [node.kind for node in moved][:2] == [BlockType.STRENGTH, BlockType.WARMUP]
        assert move_node(moved, 1, -1) == full_session

    def test_first_block_cannot_move_up(self, full_session):
        assert move_node(full_session, 0, -1) == full_session

    def test_last_block_cannot_move_down(self, full_session):
        assert move_node(full_session, 3, 1) == full_session

    def test_stale_index(self, full_session):
        assert move_node(full_session, 10, -1) == full_session

    def test_preserves_multiset(self, full_session):
        moved = move_node(move_node(full_session, 2, -1), 0, 1)
        assert sorted(node.id for node in moved) == sorted(node.id for node in full_session)


class TestSessionTotals:
    """Tests for session time and calorie totals."""

    def test_block_met(self):
        assert block_met(BlockType.STRENGTH) == 6.0
        assert block_met(BlockType.COOLDOWN) == 2.5

    def test_block_met_fallback(self):
        assert block_met(BlockType.SKILL, {BlockType.WARMUP: 3.5}) == 3.0

    def test_one_of_each(self, full_session):
        totals = session_totals(full_session, 80)
        # 49 + 84 + 56 + 35
        assert totals.total_calories == 224
        assert totals.total_time == 40

    def test_order_does_not_matter(self, full_session):
        reordered = tuple(reversed(full_session))
        assert session_totals(reordered, 80) == session_totals(full_session, 80)

    def test_zero_weight(self, full_session):
        totals = session_totals(full_session, 0)
        assert totals.total_calories == 0
        assert totals.total_time == 40

    def test_empty_session(self):
        totals = session_totals((), 80)
        assert totals.total_time == 0
        assert totals.total_calories == 0

    def test_custom_met_table(self, full_session):
        table = dict(DEFAULT_BLOCK_MET)
        table[BlockType.STRENGTH] = 8.0
        # 8.0 x 3.5 x 80 / 200 x 10 = 112
        assert session_totals(full_session, 80, table).total_calories == 224 - 84 + 112
