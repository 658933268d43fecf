import sys

import pytest

HAS_INT_STR_LIMIT = hasattr(sys, "set_int_max_str_digits")


@pytest.fixture(autouse=True)
def restore_int_str_limit():
    # main() 会解除位数上限，测试结束后恢复
    if not HAS_INT_STR_LIMIT:
        yield
        return
    original = sys.get_int_max_str_digits()
    yield
    sys.set_int_max_str_digits(original)


@pytest.fixture
def default_int_str_limit():
    if not HAS_INT_STR_LIMIT:
        pytest.skip("interpreter has no int/str digit limit")
    sys.set_int_max_str_digits(4300)
