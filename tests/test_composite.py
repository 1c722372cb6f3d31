from patternbook.composite import Cpu, GraphicsCard, Motherboard, Pc, demo


def _tree():
    card = GraphicsCard("Radeon", "Видеокарта-1")
    cpu = Cpu("Cpu-2", "Процессор-2")
    board = Motherboard("Gigabyte", "Материнская плата", [Cpu("Cpu-1", "Процессор-1"), cpu, card])
    return Pc("PC", "Компьютер", [board]), board, cpu, card


def test_finds_leaf_deep_in_tree():
    pc, _, cpu, card = _tree()
    assert pc.search("Radeon") == [card]
    assert pc.search("Cpu-2") == [cpu]


def test_finds_inner_node():
    pc, board, _, _ = _tree()
    assert pc.search("Gigabyte") == [board]


def test_finds_root_itself():
    pc, _, _, _ = _tree()
    assert pc.search("PC") == [pc]


def test_missing_name_finds_nothing():
    pc, _, _, _ = _tree()
    assert pc.search("Intel") == []


def test_duplicates_found_in_tree_order():
    first = Cpu("X", "a")
    second = GraphicsCard("X", "b")
    pc = Pc("X", "c", [Motherboard("M", "d", [first, second])])
    assert pc.search("X") == [pc, first, second]


def test_leaf_search():
    cpu = Cpu("Cpu-1", "Процессор-1")
    assert cpu.search("Cpu-1") == [cpu]
    assert cpu.search("Cpu-2") == []


def test_demo_finds_each_requested_component():
    assert demo() == ["Gigabyte", "Radeon", "Cpu-2"]