
"""Module entrypoint for `python -m avro_schema_validator`.

Delegates to the validator CLI implementation.
"""

from .cli.run_validate import main


if __name__ == "__main__":
    main()
