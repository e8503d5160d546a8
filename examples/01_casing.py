"""
Example 01: Name and Shape Conversion

This example demonstrates converting documents to storage rows and back
with the snake-case strategies.
"""

import datetime

from row_shape import (
    UnderscoreToCamelCaseMapping,
    UnderscoreToPascalCaseMapping,
)


def main():
    camel = UnderscoreToCamelCaseMapping(convert_big_integer_to_string=True)
    pascal = UnderscoreToPascalCaseMapping()

    print("=== Name Conversion ===\n")
    for name in ["userId", "HTTPServer", "select"]:
        print(f"   {name} -> {camel.property_name_to_column_name(name)}")
    print(f"   user_id -> {camel.column_name_to_property_name('user_id')} (camel)")
    print(f"   user_id -> {pascal.column_name_to_property_name('user_id')} (pascal)\n")

    print("=== Shape Conversion ===\n")
    document = {
        "userId": 1,
        "createdAt": datetime.datetime(2024, 1, 1, 9, 30),
        "viewCount": 2**60,
        "address": {"zipCode": "90210", "streetLines": ["1 Main St"]},
        "devices": [{"deviceId": "a"}, {"deviceId": "b"}],
    }
    row = camel.to_storage_row(document)
    print(f"1. Row:        {row}")
    print(f"2. Document:   {camel.to_document(row)}")
    print(f"3. Parameters: {camel.to_parameter_list(document)}")


if __name__ == "__main__":
    main()
