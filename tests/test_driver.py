from netcheck.driver import EXIT_CONFIG, EXIT_INVALID, EXIT_OK, main

GOOD = ["192.168.1.10", "255.255.255.0", "192.168.1.20", "255.255.255.0", "192.168.1.1"]


def test_check_valid_configuration(capsys):
    assert main(["check", *GOOD]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Valid network configuration!" in out
    assert "Pinging 192.168.1.20 from 192.168.1.10... Reply received." in out
    assert "Pinging 192.168.1.10 from 192.168.1.20... Reply received." in out


def test_check_invalid_configuration(capsys):
    args = ["192.168.1.10", "255.255.255.0", "192.168.2.20", "255.255.255.0", "192.168.1.1"]
    assert main(["check", *args]) == EXIT_INVALID
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Machine 2: not in same subnet as gateway.",
        "Machines not in same subnet; cannot communicate directly.",
    ]


def test_check_in_portuguese(capsys):
    assert main(["--lang", "pt", "check", "999.1.1.1", *GOOD[1:]]) == EXIT_INVALID
    assert capsys.readouterr().out.strip() == "Máquina 1: Formato de IP inválido."


def test_unknown_language():
    assert main(["--lang", "klingon", "check", *GOOD]) == EXIT_CONFIG


def test_bad_log_level():
    assert main(["--log-level", "chatty", "check", *GOOD]) == EXIT_CONFIG


def test_bundled_scenarios_match_expectations(capsys):
    assert main(["scenarios"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "=== office_lan: Two PCs and their router on one /24" in out
    assert "=== bad_octet" in out


def test_scenario_expectation_mismatch(tmp_path):
    path = tmp_path / "s.yaml"
    path.write_text(
        "scenarios:\n"
        "  wrong:\n"
        "    ip1: 192.168.1.10\n"
        "    mask1: 255.255.255.0\n"
        "    ip2: 192.168.2.20\n"
        "    mask2: 255.255.255.0\n"
        "    gateway: 192.168.1.1\n"
        "    expect_ok: true\n",
        encoding="utf-8",
    )
    assert main(["scenarios", "--file", str(path)]) == EXIT_INVALID


def test_missing_scenario_file(tmp_path):
    assert main(["scenarios", "--file", str(tmp_path / "none.yaml")]) == EXIT_CONFIG


def test_unparsable_scenario_file(tmp_path):
    path = tmp_path / "s.yaml"
    path.write_text("scenarios:\n  a: [unclosed\n", encoding="utf-8")
    assert main(["scenarios", "--file", str(path)]) == EXIT_CONFIG


def test_list_shaped_scenario_file(tmp_path):
    path = tmp_path / "s.yaml"
    path.write_text("- ip1: 10.0.0.1\n- ip1: 10.0.0.2\n", encoding="utf-8")
    assert main(["scenarios", "--file", str(path)]) == EXIT_CONFIG


def test_directory_as_scenario_file(tmp_path):
    assert main(["scenarios", "--file", str(tmp_path)]) == EXIT_CONFIG


def test_quoted_expect_ok_is_a_config_error(tmp_path):
    path = tmp_path / "s.yaml"
    path.write_text(
        "scenarios:\n"
        "  lan:\n"
        "    ip1: 192.168.1.10\n"
        "    mask1: 255.255.255.0\n"
        "    ip2: 192.168.2.20\n"
        "    mask2: 255.255.255.0\n"
        "    gateway: 192.168.1.1\n"
        "    expect_ok: \"false\"\n",
        encoding="utf-8",
    )
    assert main(["scenarios", "--file", str(path)]) == EXIT_CONFIG
