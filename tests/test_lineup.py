from logic.lineup import LINEUP_SLOTS, generate_lineup, slot_rule


def _stats(obp=0.0, avg=0.0, slg=0.0, ops=None):
    return {"obp": obp, "avg": avg, "slg": slg, "ops": obp + slg if ops is None else ops}


def test_empty_roster():
    assert generate_lineup([]) == []


def test_nine_slot_names_in_order():
    roster = [(f"p{i}", _stats(obp=0.3, avg=0.25, slg=0.4)) for i in range(9)]
    lineup = generate_lineup(roster)

    assert [slot.role_name for slot in lineup] == [rule.name for rule in LINEUP_SLOTS]
    assert [slot.order for slot in lineup] == list(range(1, 10))


def test_leadoff_takes_best_obp_and_cleanup_best_slg():
    roster = [
        ("slugger", _stats(obp=0.300, avg=0.250, slg=0.700)),
        ("walker", _stats(obp=0.450, avg=0.260, slg=0.350)),
        ("contact", _stats(obp=0.380, avg=0.340, slg=0.400)),
        ("bench", _stats(obp=0.200, avg=0.150, slg=0.200)),
    ]
    lineup = generate_lineup(roster)

    assert lineup[0].player == "walker"
    assert lineup[0].reason_text == "get on base (0.450)"
    assert lineup[1].player == "contact"
    assert lineup[1].reason_text == "contact hitter (0.340)"
    assert lineup[2].player == "slugger"
    assert lineup[2].role_name == "3rd Hole"
    assert lineup[3].player == "bench"
    assert lineup[3].role_name == "Cleanup"
    assert lineup[3].reason_text == "power/RBI production (0.200)"


def test_every_player_assigned_exactly_once():
    roster = [(f"p{i}", _stats(obp=i / 20, avg=(11 - i) / 40, slg=i / 10)) for i in range(11)]
    lineup = generate_lineup(roster)

    assert len(lineup) == 11
    assert sorted(slot.player for slot in lineup) == sorted(p for p, _ in roster)


def test_slots_past_nine_are_remaining_depth():
    roster = [(f"p{i}", _stats(obp=0.3, slg=0.4)) for i in range(11)]
    lineup = generate_lineup(roster)

    assert lineup[9].role_name == "10th Spot"
    assert lineup[10].role_name == "11th Spot"
    assert lineup[9].reason_text.startswith("remaining depth (")
    assert slot_rule(12).metric == "ops"


def test_ties_go_to_first_in_roster_order():
    roster = [("first", _stats(obp=0.3)), ("second", _stats(obp=0.3))]
    lineup = generate_lineup(roster)

    assert [slot.player for slot in lineup] == ["first", "second"]


def test_zero_stats_roster_is_filled_in_input_order():
    roster = [(name, _stats()) for name in "abc"]
    lineup = generate_lineup(roster)

    assert [slot.player for slot in lineup] == ["a", "b", "c"]
    assert lineup[0].reason_text == "get on base (0.000)"


def test_greedy_pass_does_not_revisit_earlier_slots():
    roster = [
        ("star", _stats(obp=0.500, avg=0.300, slg=0.800)),
        ("avg", _stats(obp=0.300, avg=0.350, slg=0.300)),
        ("power", _stats(obp=0.250, avg=0.200, slg=0.600)),
        ("filler", _stats(obp=0.200, avg=0.180, slg=0.250)),
    ]
    lineup = generate_lineup(roster)

    # The best slugger leads off on OBP and the next one goes third on OPS,
    # leaving cleanup to the weakest bat.
    assert [slot.player for slot in lineup] == ["star", "avg", "power", "filler"]
    assert lineup[3].reason_text == "power/RBI production (0.250)"


def test_nine_players_obp_and_slg_leaders():
    roster = [(f"p{i}", _stats(obp=0.300, avg=0.250, slg=0.400, ops=0.700)) for i in range(7)]
    roster.insert(3, ("on_base", _stats(obp=0.450, avg=0.250, slg=0.400)))
    # Same OPS as the field, so OPS ties keep roster order ahead of cleanup.
    roster.append(("power", _stats(obp=0.200, avg=0.250, slg=0.500, ops=0.700)))

    lineup = generate_lineup(roster)

    assert len(lineup) == 9
    assert lineup[0].role_name == "Leadoff"
    assert lineup[0].player == "on_base"
    assert lineup[3].role_name == "Cleanup"
    assert lineup[3].player == "power"
    assert lineup[3].reason_text == "power/RBI production (0.500)"
    assert [slot.player for slot in lineup[1:3]] == ["p0", "p1"]
