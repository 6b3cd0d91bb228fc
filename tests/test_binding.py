from __future__ import annotations

import importlib.util
import inspect
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


def _seeded_sum(self, a, b, c):
    return a + b + c + self.seed


class _Seeded:
    def __init__(self, seed: int) -> None:
        self.seed = seed


class _Point:
    def __init__(self, baz, greeting) -> None:
        self.bar = 10
        self.baz = baz
        self.greeting = greeting

    def foo(self):
        return self.bar + self.baz


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for binding tests")
class BindTests(unittest.TestCase):
    def test_bind_locks_context(self) -> None:
        from fastfn import bind

        bound = bind(_seeded_sum, _Seeded(100))
        self.assertEqual(bound(1, 2, 3), 106)

    def test_bind_partially_applies(self) -> None:
        from fastfn import bind

        bound = bind(_seeded_sum, _Seeded(100), 1, 2)
        self.assertEqual(bound(3), 106)

    def test_bind_matches_direct_call_across_specialization_bound(self) -> None:
        from fastfn import bind

        def collect(self, *args):
            return (self, args)

        context = object()
        for count in range(0, 7):
            args = tuple(range(count))
            with self.subTest(count=count):
                self.assertEqual(bind(collect, context)(*args), collect(context, *args))
                self.assertEqual(bind(collect, context, "x")(*args), collect(context, "x", *args))
                self.assertEqual(bind(collect, context, 1, 2, 3, 4)(*args), collect(context, 1, 2, 3, 4, *args))

    def test_bind_ignores_instance_receiver_when_stored_on_class(self) -> None:
        from fastfn import bind

        locked = _Seeded(1)

        class Host:
            seed = 1000
            total = bind(_seeded_sum, locked)

        self.assertEqual(Host().total(1, 2, 3), 7)

    def test_bind_forwards_keywords(self) -> None:
        from fastfn import bind

        def describe(self, a, *, suffix=""):
            return f"{self}:{a}{suffix}"

        self.assertEqual(bind(describe, "ctx")(1, suffix="!"), "ctx:1!")

    def test_bind_propagates_callable_failure(self) -> None:
        from fastfn import bind

        def boom(self, value):
            raise KeyError(value)

        with self.assertRaises(KeyError):
            bind(boom, None)("missing")

    def test_bind_exposes_wrapped_metadata_and_remaining_signature(self) -> None:
        from fastfn import bind

        bound = bind(_seeded_sum, _Seeded(0), 1)
        self.assertEqual(bound.__name__, "_seeded_sum")
        self.assertIs(bound.func, _seeded_sum)
        self.assertEqual(bound.args, (1,))
        self.assertEqual(list(inspect.signature(bound).parameters), ["b", "c"])


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for binding tests")
class PartialTests(unittest.TestCase):
    def test_partial_forwards_instance_receiver(self) -> None:
        from fastfn import partial

        class Host:
            seed = 100
            foo = partial(_seeded_sum, 1, 2)

        self.assertEqual(Host().foo(3), 106)

    def test_partial_with_explicit_receiver(self) -> None:
        from fastfn import partial

        applied = partial(_seeded_sum, 1, 2)
        self.assertEqual(applied.call(_Seeded(100), 3), 106)

    def test_partial_without_receiver_is_plain_prefix(self) -> None:
        from fastfn import partial

        def collect(*args):
            return args

        for count in range(0, 6):
            args = tuple(range(count))
            with self.subTest(count=count):
                self.assertEqual(partial(collect, "a", "b")(*args), ("a", "b", *args))

    def test_partial_class_access_returns_partial_itself(self) -> None:
        from fastfn import partial
        from fastfn.binding import PartialFunction

        class Host:
            foo = partial(_seeded_sum, 1)

        self.assertIsInstance(Host.foo, PartialFunction)

    def test_partial_signature_drops_prefix(self) -> None:
        from fastfn import partial

        def add(a, b, c=0):
            return a + b + c

        self.assertEqual(list(inspect.signature(partial(add, 1)).parameters), ["b", "c"])


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for binding tests")
class PartialConstructorTests(unittest.TestCase):
    def setUp(self) -> None:
        from fastfn import partial_constructor

        self.Partial = partial_constructor(_Point, 32)

    def test_construct_is_instance_of_original(self) -> None:
        instance = self.Partial.construct("hello world")
        self.assertIsInstance(instance, _Point)

    def test_construct_applies_bound_and_supplied_arguments(self) -> None:
        instance = self.Partial.construct("hello world")
        self.assertEqual(instance.baz, 32)
        self.assertEqual(instance.greeting, "hello world")

    def test_construct_supplies_class_methods(self) -> None:
        self.assertEqual(self.Partial.construct("hello world").foo(), 42)

    def test_call_form_matches_construct_form(self) -> None:
        via_call = self.Partial("hello world")
        via_construct = self.Partial.construct("hello world")
        self.assertIsInstance(via_call, _Point)
        self.assertEqual(via_call.foo(), 42)
        self.assertEqual(vars(via_call), vars(via_construct))

    def test_instancecheck_delegates_to_target_class(self) -> None:
        self.assertIsInstance(self.Partial("x"), self.Partial)
        self.assertNotIsInstance(object(), self.Partial)

    def test_constructor_failure_propagates(self) -> None:
        with self.assertRaises(TypeError):
            self.Partial("a", "too", "many")


if __name__ == "__main__":
    unittest.main()
