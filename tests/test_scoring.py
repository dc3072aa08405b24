from inventory_extractor.services.scoring import calculate_item_confidence, validate_item


def test_confidence_counts_present_fields() -> None:
    mappings = {"itemName": 0, "brand": 1, "purchaseDate": 2}

    assert calculate_item_confidence(["Taladro", "Bosch", "2023"], mappings) == 75
    assert calculate_item_confidence(["Taladro", " ", ""], mappings) == 50


def test_confidence_full_row_is_capped_at_100() -> None:
    mappings = {"itemName": 0, "brand": 1, "model": 2, "purchaseDate": 3, "specifications": 4, "supplier": 5}
    row = ["Taladro", "Bosch", "GSB", "2023", "750W", "Ferreteria"]

    assert calculate_item_confidence(row, mappings) == 100


def test_confidence_stays_in_bounds_for_any_mapping() -> None:
    rows = [[], ["a"], ["a", "b", "c", "d", "e"], ["", "", "", "", ""]]
    mappings_options = [{}, {"itemName": 0}, {"itemName": 0, "brand": 0, "model": 0, "purchaseDate": 0, "specifications": 0}]

    for row in rows:
        for mappings in mappings_options:
            assert 0 <= calculate_item_confidence(row, mappings) <= 100


def test_validate_item_requires_item_name() -> None:
    issues = validate_item(["", "Bosch"], {"itemName": 0, "brand": 1})

    assert len(issues) == 1
    assert issues[0].field == "itemName"
    assert issues[0].message == "Item name is required"
    assert issues[0].severity == "error"


def test_validate_item_flags_unmapped_item_name() -> None:
    assert len(validate_item(["Bosch"], {"brand": 0})) == 1


def test_validate_item_accepts_named_row() -> None:
    assert validate_item(["Taladro"], {"itemName": 0}) == []
