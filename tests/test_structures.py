import pytest

from algosolve.structures import (
    absolute_heap,
    count_buildings,
    lookup_passwords,
    max_heap,
    outfit_combinations,
    pokedex_answers,
    print_order,
    run_queue_commands,
    run_set_commands,
)


def test_queue_front_and_back():
    assert run_queue_commands(["push 7", "push 8", "front", "back"]) == [7, 8]


def test_queue_pop_is_fifo():
    pushes = [4, 9, 2]
    commands = [f"push {v}" for v in pushes] + ["pop"] * len(pushes)
    assert run_queue_commands(commands) == pushes


def test_queue_empty_reports():
    assert run_queue_commands(["pop", "front", "back", "empty", "size"]) == [-1, -1, -1, 1, 0]


def test_queue_size_counts_pushes():
    pushes = [f"push {v}" for v in range(5)]
    assert run_queue_commands(pushes + ["size", "empty"]) == [len(pushes), 0]


def test_queue_rejects_unknown_command():
    with pytest.raises(ValueError):
        run_queue_commands(["jump"])


def test_absolute_heap_pops_by_absolute_value():
    values = [5, -3, 8, -1, 2, -7]
    popped = absolute_heap(values + [0] * len(values))
    assert sorted(popped) == sorted(values)
    assert [abs(v) for v in popped] == sorted(abs(v) for v in values)


def test_absolute_heap_ties_go_negative_first():
    assert absolute_heap([1, -1, 0, 0]) == [-1, 1]


def test_absolute_heap_empty_gives_zero():
    assert absolute_heap([0]) == [0]


def test_max_heap_pops_largest_first():
    values = [3, 12, 7, 1]
    assert max_heap(values + [0] * len(values)) == sorted(values, reverse=True)


def test_max_heap_ignores_negatives_and_reports_empty():
    assert max_heap([-5, 0]) == [0]


def test_print_order_single_document():
    assert print_order([5], 0) == 1


def test_print_order_equal_priorities_keep_queue_order():
    priorities = [1] * 6
    assert [print_order(priorities, t) for t in range(len(priorities))] == list(
        range(1, len(priorities) + 1)
    )


def test_print_order_example():
    assert print_order([1, 2, 3, 4], 2) == 2


def test_print_order_highest_first():
    priorities = [1, 1, 9, 1, 1, 1]
    assert print_order(priorities, priorities.index(max(priorities))) == 1


def test_print_order_rejects_missing_document():
    with pytest.raises(IndexError):
        print_order([1, 2], 5)


def test_set_add_and_check():
    assert run_set_commands(["add 3", "check 3", "check 4"]) == [True, False]


def test_set_toggle_twice_restores():
    assert run_set_commands(["add 5", "toggle 5", "check 5", "toggle 5", "check 5"]) == [
        False,
        True,
    ]


def test_set_all_and_empty():
    checks = [f"check {v}" for v in (1, 20)]
    assert run_set_commands(["all"] + checks + ["empty"] + checks) == [True, True, False, False]


def test_set_remove():
    assert run_set_commands(["add 2", "remove 2", "check 2"]) == [False]


def test_set_rejects_out_of_range():
    with pytest.raises(ValueError):
        run_set_commands(["add 21"])


def test_count_buildings_example():
    skyline = [(1, 1), (2, 2), (5, 1), (6, 3), (8, 1), (11, 0), (15, 2), (17, 3), (20, 2), (22, 1)]
    assert count_buildings(skyline) == 6


def test_count_buildings_flat_ground():
    assert count_buildings([(1, 0), (4, 0)]) == 0


def test_count_buildings_rising_steps():
    skyline = [(x, x) for x in range(1, 6)]
    assert count_buildings(skyline) == len(skyline)


def test_count_buildings_rejects_negative_height():
    with pytest.raises(ValueError):
        count_buildings([(1, -1)])


def test_pokedex_both_directions():
    names = ["Bulbasaur", "Ivysaur", "Venusaur"]
    assert pokedex_answers(names, ["2", "Venusaur"]) == [names[1], names.index("Venusaur") + 1]


def test_pokedex_round_trip():
    names = ["Pikachu", "Raichu", "Sandshrew"]
    numbers = pokedex_answers(names, names)
    assert pokedex_answers(names, [str(n) for n in numbers]) == names


def test_pokedex_unknown_raises():
    with pytest.raises(KeyError):
        pokedex_answers(["Pikachu"], ["Mew"])
    with pytest.raises(KeyError):
        pokedex_answers(["Pikachu"], ["9"])


def test_lookup_passwords():
    entries = [("blog.example.com", "password"), ("mail.example.com", "secret")]
    assert lookup_passwords(entries, ["mail.example.com", "blog.example.com"]) == [
        "secret",
        "password",
    ]


def test_lookup_passwords_later_entry_wins():
    entries = [("shop.example.com", "password"), ("shop.example.com", "secret")]
    assert lookup_passwords(entries, ["shop.example.com"]) == ["secret"]


def test_lookup_passwords_missing_site():
    with pytest.raises(KeyError):
        lookup_passwords([], ["nowhere.example.com"])


def test_outfit_example():
    items = [("hat", "headgear"), ("sunglasses", "eyewear"), ("turban", "headgear")]
    assert outfit_combinations(items) == 5


def test_outfit_single_kind_counts_items():
    items = [(f"shirt{i}", "top") for i in range(4)]
    assert outfit_combinations(items) == len(items)


def test_outfit_duplicates_ignored_and_empty():
    assert outfit_combinations([("cap", "head"), ("cap", "head")]) == 1
    assert outfit_combinations([]) == 0