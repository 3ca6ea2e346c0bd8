from modekit.components.interop import (
    BuildInteropInput,
    build_interop,
    run_interop,
    to_interpolated,
    to_module_exports,
    to_scss_var,
)


class TestInterop:
    def test_scss_var(self) -> None:
        assert to_scss_var("$color-bg") == "$color-bg: var(--🔒color-bg);"

    def test_interpolated(self) -> None:
        assert to_interpolated("$color-bg") == "#{'$color-bg'}: $color-bg;"

    def test_module_exports(self) -> None:
        assert to_module_exports(["$a", "$b"]) == ":export { #{'$a'}: $a;\n#{'$b'}: $b; }"

    def test_full_text(self) -> None:
        text = run_interop(BuildInteropInput(intents=("$a", "$b"))).text

        assert text == (
            "$a: var(--🔒a);\n"
            "$b: var(--🔒b);\n"
            ":export { #{'$a'}: $a;\n#{'$b'}: $b; }"
        )

    def test_one_variable_per_intent_in_order(self) -> None:
        intents = ("$z", "$fontFamily-base", "$a")
        lines = build_interop(intents).split("\n")

        assert [line.split(":")[0] for line in lines[: len(intents)]] == list(intents)
