import math

from batch import BatchEvaluator, summary


class TestBatchEvaluator:

    def test_evaluate_many_records_each_row(self):
        frame = BatchEvaluator().evaluate_many(["1+2", "1+2.5", "1/0", "(1"])

        assert list(frame.columns) == ['expression', 'kind', 'value', 'error']
        assert list(frame['kind'][:2]) == ['INTEGER', 'DECIMAL']
        assert frame['value'][0] == 3
        assert isinstance(frame['value'][0], int)
        assert frame['value'][1] == 3.5
        assert frame['error'][2] == 'EVAL:DIVISION_BY_ZERO'
        assert frame['error'][3] == 'UNBALANCED_PAREN'

    def test_options_are_forwarded(self):
        frame = BatchEvaluator(right_associative_power=False).evaluate_many(["2^3^2"])
        assert frame['value'][0] == 64

        frame = BatchEvaluator(strict_decimal_division=True).evaluate_many(["1.5/0"])
        assert frame['error'][0] == 'EVAL:DIVISION_BY_ZERO'

        frame = BatchEvaluator().evaluate_many(["1.5/0"])
        assert math.isinf(frame['value'][0])

    def test_evaluate_file_skips_blank_lines(self, tmp_path):
        path = tmp_path / "expressions.txt"
        path.write_text("1+1\n\n  2*3  \n1.2.3\n", encoding='utf-8')

        frame = BatchEvaluator().evaluate_file(str(path))

        assert list(frame['expression']) == ["1+1", "2*3", "1.2.3"]
        assert frame['value'][1] == 6
        assert frame['error'][2] == 'LEX'

    def test_summary(self):
        frame = BatchEvaluator().evaluate_many(["1", "1/0", "2/0", "x"])
        stats = summary(frame)

        assert stats['total'] == 4
        assert stats['ok'] == 1
        assert stats['failed'] == 3
        assert stats['errors'] == {'EVAL:DIVISION_BY_ZERO': 2, 'LEX': 1}

    def test_overlong_literal_fails_only_its_row(self, default_int_str_limit):
        frame = BatchEvaluator().evaluate_many(["1+2", "1" * 5000])

        assert len(frame) == 2
        assert frame['value'][0] == 3
        assert frame['error'][1] == 'LEX'
