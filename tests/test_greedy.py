import pytest

from algokit.greedy import UnreachableError, coin_change, lottery_bills, min_refills


def test_min_refills_source_example():
    assert min_refills(950, 400, [200, 375, 550, 750]) == 2


def test_min_refills_no_stop_needed():
    assert min_refills(300, 400, [100, 200]) == 0


def test_min_refills_gap_too_large():
    with pytest.raises(UnreachableError):
        min_refills(950, 400, [200, 700])


def test_min_refills_destination_too_far():
    with pytest.raises(UnreachableError):
        min_refills(1000, 400, [])


def test_unreachable_is_value_error():
    with pytest.raises(ValueError):
        min_refills(10, 1, [5])


def test_coin_change_source_example():
    assert coin_change(17) == 4


@pytest.mark.parametrize("amount", [0, 3, 9, 17, 44, 99])
def test_coin_change_adding_ten_adds_one_coin(amount):
    assert coin_change(amount + 10) == coin_change(amount) + 1


@pytest.mark.parametrize("amount", [0, 1, 2, 3, 4])
def test_coin_change_small_amounts_are_ones(amount):
    assert coin_change(amount) == amount


def test_coin_change_negative():
    with pytest.raises(ValueError):
        coin_change(-1)


@pytest.mark.parametrize("amount, expected", [(125, 3), (43, 5)])
def test_lottery_bills_examples(amount, expected):
    assert lottery_bills(amount) == expected


@pytest.mark.parametrize("amount", [0, 7, 43, 99, 125])
def test_lottery_bills_adding_hundred_adds_one(amount):
    assert lottery_bills(amount + 100) == lottery_bills(amount) + 1


@pytest.mark.parametrize("amount", [0, 1, 2, 3, 4])
def test_lottery_bills_small_amounts_are_ones(amount):
    assert lottery_bills(amount) == amount


def test_lottery_bills_negative():
    with pytest.raises(ValueError):
        lottery_bills(-5)