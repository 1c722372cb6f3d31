from patternbook.mediator import Cargo, Passenger, StationManager, demo


def test_first_vehicle_takes_platform_second_is_queued():
    manager = StationManager()
    bus, truck = Passenger(manager), Cargo(manager)
    assert manager.can_arrive(bus) is True
    assert manager.can_arrive(truck) is False
    assert list(manager.queue) == [truck]
    assert manager.platform_free is False


def test_go_frees_platform_when_queue_empty():
    manager = StationManager()
    bus = Passenger(manager)
    bus.arrive()
    bus.go()
    assert manager.platform_free is True
    assert not manager.queue


def test_go_lets_queued_vehicle_in():
    manager = StationManager()
    bus, truck = Passenger(manager), Cargo(manager)
    bus.arrive()
    assert truck.arrive() == [Cargo.delayed_message]
    lines = bus.go()
    assert lines == [Passenger.go_message, Cargo.permit_message, Cargo.arrived_message]
    assert manager.platform_free is False
    assert not manager.queue


def test_queue_is_first_in_first_out():
    manager = StationManager()
    first, second, third = Passenger(manager), Cargo(manager), Passenger(manager)
    first.arrive()
    second.arrive()
    third.arrive()
    first.go()
    assert list(manager.queue) == [third]


def test_demo_sequence():
    assert demo(0) == [
        "Пасажиры: занимайте места...",
        "Грузовик: отправление задерживается...",
        "Пасажиры: отправление!",
        "Грузовик: погрузка...",
        "Грузовик: отправлен",
    ]