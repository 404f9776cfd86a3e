from hostprobe.ulimit import collect_ulimit_info, parse_ulimit, parse_ulimit_line


def test_parse_line_strips_parentheses():
    assert parse_ulimit_line("core file size          (blocks, -c) unlimited") == (
        "core_file_size",
        "unlimited",
    )


def test_parse_line_too_short():
    assert parse_ulimit_line("(blocks, -c) unlimited") is None
    assert parse_ulimit_line("") is None


def test_parse_output_skips_blank_and_single_word_lines():
    text = "open files (-n) 1024\n\nalone\nmax user processes (-u) 63000\n"
    result = parse_ulimit(text)
    assert result == {"open_files": "1024", "max_user_processes": "63000"}


def test_keys_never_contain_spaces():
    text = "stack size              (kbytes, -s) 8192\npipe size (512 bytes, -p) 8"
    result = parse_ulimit(text)
    assert all(" " not in key for key in result)
    assert result["stack_size"] == "8192"


def test_collect_returns_limits():
    result = collect_ulimit_info()
    assert result
    assert all(key and " " not in key for key in result)
    assert all(value and " " not in value for value in result.values())