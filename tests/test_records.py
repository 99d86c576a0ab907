import dataclasses

import pytest

from rustcoach.drills.records import (
    ChangeColor,
    Cons,
    Echo,
    MachineState,
    Move,
    Nil,
    Package,
    Point,
    Quit,
    Rectangle,
    ReportCard,
    create_empty_list,
    create_non_empty_list,
    create_order_template,
)


def test_generate_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.print() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.print() == "Gary Plotter (11) - achieved a grade of A+"


def test_report_card_rejects_age_out_of_range():
    with pytest.raises(ValueError):
        ReportCard(grade="B", student_name="Someone", student_age=256)


def test_your_order():
    template = create_order_template()
    order = dataclasses.replace(template, name="Hacker in Rust", count=1)
    assert order.name == "Hacker in Rust"
    assert order.year == template.year
    assert order.made_by_phone == template.made_by_phone
    assert order.made_by_mobile == template.made_by_mobile
    assert order.made_by_email == template.made_by_email
    assert order.item_number == template.item_number
    assert order.count == 1


def test_order_template_values():
    template = create_order_template()
    assert (template.name, template.year, template.item_number) == ("Bob", 2019, 123)
    assert template.made_by_email is True


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="below 10 grams"):
        Package("Spain", "Austria", 5)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international()


def test_create_local_package():
    assert not Package("Canada", "Canada", 1200).is_international()


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    cents_per_gram = 3
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000


def test_match_message_call():
    state = MachineState(
        color=(0, 0, 0), position=Point(0, 0), quit=False, message="hello world"
    )
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("Hello world!"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())
    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert state.message == "Hello world!"


def test_process_unknown_message():
    state = MachineState(color=(0, 0, 0), position=Point(0, 0), quit=False, message="")
    with pytest.raises(TypeError):
        state.process("jump")


def test_change_color_out_of_range():
    with pytest.raises(ValueError):
        ChangeColor((256, 0, 0))


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError, match="Rectangle width and height cannot be negative!"):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError, match="Rectangle width and height cannot be negative!"):
        Rectangle(10, -10)


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty == Cons(1, Nil())
    assert non_empty != create_empty_list()