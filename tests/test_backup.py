from clockconfig.backup import BackupValidator, format_errors, validate


def test_valid_backup_has_no_errors(valid_backup):
    assert validate(valid_backup) == []


def test_missing_device_name(valid_backup):
    del valid_backup["deviceName"]
    assert "Invalid deviceName" in validate(valid_backup)


def test_blank_or_long_device_name(valid_backup):
    valid_backup["deviceName"] = "   "
    assert validate(valid_backup) == ["Invalid deviceName"]
    valid_backup["deviceName"] = "x" * 21
    assert validate(valid_backup) == ["Invalid deviceName"]


def test_errors_accumulate(valid_backup):
    valid_backup["alarmTime"] = 1440
    valid_backup["brightness"] = 0
    valid_backup["offset"] = 13
    valid_backup["latitude"] = 90.5
    valid_backup["longitude"] = -181
    assert validate(valid_backup) == [
        "Bad alarm time",
        "Invalid brightness",
        "Invalid latitude",
        "Invalid longitude",
        "Invalid offset",
    ]


def test_unknown_or_padded_activation(valid_backup):
    valid_backup["alarmActivation"] = "  WEEKDAYS "
    assert validate(valid_backup) == []
    valid_backup["alarmActivation"] = "SOMETIMES"
    assert validate(valid_backup) == ["Missing alarm activation"]
    del valid_backup["alarmActivation"]
    assert validate(valid_backup) == ["Missing alarm activation"]


def test_rainbow_pattern_exempts_colour(valid_backup):
    valid_backup["dayPattern"] = "RAINBOW_DIGITS"
    valid_backup["dayColour"] = "not-an-array"
    assert validate(valid_backup) == []

    valid_backup["dayPattern"] = "SOLID_COLOUR"
    assert validate(valid_backup) == ["Invalid day colour"]


def test_colour_shape_and_range(valid_backup):
    for bad in ([1, 2], [0, 0, 256], [0, -1, 0], [0, "0", 0], [True, 0, 0]):
        valid_backup["nightColour"] = bad
        assert validate(valid_backup) == ["Invalid night colour"], bad


def test_unknown_pattern(valid_backup):
    valid_backup["nightPattern"] = "STROBE"
    assert validate(valid_backup) == ["Invalid night pattern"]
    valid_backup["nightPattern"] = 3
    assert validate(valid_backup) == ["Invalid night pattern"]


def test_radio_fields_skipped_when_not_installed(valid_backup):
    valid_backup["isRadioInstalled"] = False
    valid_backup["radioFrequency"] = 12
    valid_backup["isUseRadio"] = "maybe"
    assert validate(valid_backup) == []


def test_radio_fields_checked_when_installed(valid_backup):
    valid_backup["radioFrequency"] = 108.0
    valid_backup["isUseRadio"] = "yes"
    assert validate(valid_backup) == ["Invalid radio frequency", "Invalid use radio flag"]
    valid_backup["radioFrequency"] = 88.0
    valid_backup["isUseRadio"] = True
    assert validate(valid_backup) == []


def test_strict_types(valid_backup):
    valid_backup["isRadioInstalled"] = "true"
    valid_backup["is24Hour"] = 1
    valid_backup["brightness"] = "10"
    valid_backup["alarmTime"] = True
    assert validate(valid_backup) == [
        "Bad alarm time",
        "Missing radio installed",
        "Invalid brightness",
        "Invalid 24 hour flag",
    ]


def test_timezone_rules(valid_backup):
    valid_backup["timezone"] = ""
    assert validate(valid_backup) == ["Invalid timezone"]
    valid_backup["timezone"] = "Z" * 21
    assert validate(valid_backup) == ["Invalid timezone"]


def test_non_object_backup():
    assert validate([1, 2, 3]) == ["Backup must be a JSON object"]
    assert validate(None) == ["Backup must be a JSON object"]


def test_supplied_option_lists(valid_backup):
    v = BackupValidator(activation_options=["ALL_DAYS"], pattern_options=["SOLID_COLOUR", "RAINBOW_DIGITS"])
    assert v.validate(valid_backup) == ["Missing alarm activation", "Invalid night pattern"]


def test_format_errors():
    assert format_errors(["A", "B"]) == "Invalid backup data:<br><ul><li>A</li><li>B</li></ul>"
