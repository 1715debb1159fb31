from gecko import assemble, code_to_instruction, convert_gecko_code
from gecko.codes import parse_code_text

CODE = """
$Example [tester]
04001040 00000001
C2001000 00000002
38600001 90640000
60000000 00000000
C6000100 80001234
"""


def test_full_report() -> None:
    report = convert_gecko_code(parse_code_text(CODE))
    assert report == (
        "// - Constant 32-bit RAM Write -\n"
        "// Target address: 0x80001040\n"
        "// Value: 0x00000001"
        "\n\n// ---\n\n"
        "// - Insert Assembly -\n"
        "// Target address: 0x80001000\n"
        "\n"
        "li r3, 0x1\n"
        "stw r3, 0x0(r4)\n"
        "\n\n// ---\n\n"
        "// - Create a Branch -\n"
        "// Target address: 0x80000100\n"
        "// Branch to: 0x80001234"
        "\n\n// ---\n\n"
    )


def test_rendered_instructions_reassemble() -> None:
    for word in parse_code_text(CODE)[4:6]:
        assert assemble(code_to_instruction(word)) == word
