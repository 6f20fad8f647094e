import pytest

from eglite.array import Array, ByteArray


def test_array_big():
    array = Array(False, False)
    for i in range(10000):
        array.append(i)
    assert len(array) == 10000
    for i in range(10000):
        assert array[i] == i


def test_array_index():
    array = Array(False, False)
    array.append(27)
    assert array[0] == 27


def test_array_append_zero_terminated():
    array = Array(True, False)
    array.append(27)
    assert array[0] == 27
    assert array[1] == 0


def test_array_append():
    array = Array(False, False)
    assert len(array) == 0
    array.append(27)
    assert len(array) == 1


def test_array_insert_val_self():
    array = Array(False, False)
    array.insert_val(0, array)
    assert array[0] is array
    array.insert_val(1, array)
    assert array[1] is array
    array.insert_val(2, array)
    assert array[2] is array


def test_array_insert_val_order():
    array = Array(False, False)
    ptr0, ptr1, ptr2, ptr3 = object(), object(), object(), object()
    array.insert_val(0, ptr0)
    array.insert_val(1, ptr1)
    array.insert_val(2, ptr2)
    array.insert_val(1, ptr3)
    assert array[0] is ptr0
    assert array[1] is ptr3
    assert array[2] is ptr1
    assert array[3] is ptr2


def test_array_remove():
    array = Array(False, False)
    array.append_vals([30, 29, 28, 27, 26, 25])
    assert len(array) == 6
    array.remove_index(3)
    assert len(array) == 5
    assert array[3] == 26
    assert list(array) == [30, 29, 28, 26, 25]


def test_array_remove_index_fast_moves_last():
    array = Array()
    array.append_vals([30, 29, 28, 27, 26, 25])
    array.remove_index_fast(1)
    assert list(array) == [30, 25, 28, 27, 26]


def test_array_remove_index_fast_last_element():
    array = Array()
    array.append_vals([1, 2, 3])
    array.remove_index_fast(2)
    assert list(array) == [1, 2]


def test_array_remove_out_of_range():
    array = Array()
    array.append(1)
    with pytest.raises(IndexError):
        array.remove_index(1)
    with pytest.raises(IndexError):
        array.remove_index_fast(5)


def test_array_insert_out_of_range():
    array = Array()
    with pytest.raises(IndexError):
        array.insert_val(1, "x")


def test_array_set_size_grow_and_shrink():
    array = Array(False, True)
    array.append_vals([1, 2])
    array.set_size(5)
    assert len(array) == 5
    assert list(array) == [1, 2, 0, 0, 0]
    array.set_size(1)
    assert list(array) == [1]


def test_array_set_size_negative():
    array = Array()
    with pytest.raises(ValueError):
        array.set_size(-1)


def test_array_capacity_covers_length():
    array = Array(True, False, 0)
    for i in range(200):
        array.append(i)
        assert array.capacity >= len(array) + 1
        assert array.capacity % 64 == 0


def test_array_insert_vals_many():
    array = Array()
    array.append_vals([1, 5])
    array.insert_vals(1, [2, 3, 4])
    assert list(array) == [1, 2, 3, 4, 5]
    assert array[1:3] == [2, 3]


def test_byte_array_append_and_read():
    data = ByteArray()
    assert len(data) == 0
    data.append(b"abc").append(bytes([1, 2]))
    assert len(data) == 5
    assert data.to_bytes() == b"abc\x01\x02"
    assert data[0] == ord("a")
    assert data[1:3] == b"bc"