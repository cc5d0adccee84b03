#!/usr/bin/env python3
"""
Example usage of the Record Mapper.

This script demonstrates how to use the Record Mapper to reshape a batch
of CRM contact records into nested customer profiles.
"""

import json
import tempfile
from pathlib import Path
from record_mapper import RecordMapper


def main():
    """Main example function."""
    print("Record Mapper Example")
    print("=" * 50)

    # Create sample data
    contacts = [
        {
            "id": "123",
            "firstName": "John",
            "lastName": "Doe",
            "person": {"nationality": "GB"},
            "contacts": [
                {"email": "john@example.com", "primary": True},
                {"email": "jd@work.example", "primary": False}
            ]
        },
        {
            "id": "124",
            "firstName": "Maria",
            "lastName": "Santos",
            "person": {"nationality": "PH"},
            "contacts": []
        }
    ]

    mapping = {
        "id": "id",
        "personalInformation.forename": "firstName",
        "personalInformation.surname": "lastName",
        "personalInformation.nationality": {
            "$transform": "countryFromISO",
            "$path": "person.nationality"
        },
        "emails[].address": "contacts[].email",
        "emails[].primary": "contacts[].primary",
        "source": "=crm-export",
        "flags": {"$literal": {"migrated": True}}
    }

    print(f"Mapping {len(contacts)} records with {len(mapping)} mapping entries\n")

    with tempfile.TemporaryDirectory() as temp_dir:
        input_file = Path(temp_dir) / "contacts.json"
        mapping_file = Path(temp_dir) / "mapping.json"
        output_file = Path(temp_dir) / "profiles.json"

        input_file.write_text(json.dumps(contacts, indent=2), encoding="utf-8")
        mapping_file.write_text(json.dumps(mapping, indent=2), encoding="utf-8")

        with RecordMapper(enable_profiling=True) as mapper:
            result = mapper.transform_files(input_file, mapping_file, output_file)

            if result.success:
                print("✅ Success!")
                print(f"   Records mapped: {result.record_count}")
                print(f"   Output file: {result.output_file}")

                for warning in result.warnings:
                    print(f"   ⚠️  {warning}")

                print("\nOutput:")
                print(output_file.read_text(encoding="utf-8"))

                summary = mapper.profiler.get_performance_summary()
                print(f"Duration: {summary['total_duration']:.4f}s")
            else:
                print("❌ Failed to map records")
                for error in result.errors or []:
                    print(f"   Error: {error}")


if __name__ == "__main__":
    main()
