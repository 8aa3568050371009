from compilerlab.lexer import (
    SAMPLE_PROGRAM,
    analyze,
    is_constant,
    is_identifier,
    main,
    remove_comments,
    tokenize,
)


def test_remove_line_comment():
    assert remove_comments("int a; // assign value") == "int a; "


def test_remove_single_line_block_comment():
    code = "int /* note */a;"
    assert remove_comments(code) == "int a;"


def test_block_comment_across_lines_is_kept():
    code = "/* return\nvalue*/"
    assert remove_comments(code) == code


def test_tokenize_splits_on_operators_and_punctuation():
    assert tokenize("return a+b;") == ["return", "a", "+", "b", ";"]


def test_tokenize_drops_whitespace():
    tokens = tokenize(" int\t x \n = 5 ;")
    assert all(token.strip() == token and token for token in tokens)
    assert "".join(tokens) == "intx=5;"


def test_constants():
    assert is_constant("5")
    assert is_constant("'x'")
    assert not is_constant("7H")
    assert not is_constant("'xy'")


def test_identifiers():
    assert is_identifier("_a1")
    assert is_identifier("b")
    assert not is_identifier("7H")
    assert not is_identifier("#include")


def test_analyze_sample_program():
    report = analyze(SAMPLE_PROGRAM)
    assert "7H" in report.errors
    assert "#include" in report.errors
    assert {"int", "char", "return", "using", "namespace", "std", "main"} <= set(
        report.keywords
    )
    assert "'x'" in report.constants
    assert "5" in report.constants
    assert "iostream" in report.identifiers


def test_analyze_accounts_for_every_token():
    report = analyze(SAMPLE_PROGRAM)
    total = (
        report.keywords
        + report.identifiers
        + report.constants
        + report.operators
        + report.punctuation
        + report.errors
    )
    assert sorted(total) == sorted(tokenize(remove_comments(SAMPLE_PROGRAM)))


def test_format():
    assert analyze("int x;").format() == (
        "Keywords: int \nIdentifiers: x \nConstants: \n"
        "Operators: \nPunctuation: ; \nLexical Errors: "
    )


def test_main_sample(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Lexical Errors: " in out
    assert "7H" in out


def test_main_file(tmp_path, capsys):
    source = tmp_path / "input.c"
    source.write_text("char b = 'x';\n")
    main([str(source)])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Keywords: char "
    assert lines[2] == "Constants: 'x' "