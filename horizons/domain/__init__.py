"""Domain layer: verification records, account entities, ports and validators."""
