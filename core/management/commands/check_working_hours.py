import json

from django.core.management.base import BaseCommand, CommandError

from core.services.working_hours import validate_hierarchical_working_hours, validate_working_hours


class Command(BaseCommand):
    help = (
        "Validate working hours from a JSON file. The file holds either "
        "{\"schedule\": [...]} or {\"parentSchedule\": [...], \"childSchedule\": [...]} "
        "with optional parentLabel/childLabel."
    )

    def add_arguments(self, parser):
        parser.add_argument("path", help="JSON file with the schedule(s) to check")

    def handle(self, *args, **opts):
        try:
            with open(opts["path"], encoding="utf-8") as fh:
                payload = json.load(fh)
        except (OSError, ValueError) as e:
            raise CommandError(f"cannot read {opts['path']}: {e}")

        if not isinstance(payload, dict):
            raise CommandError("expected a JSON object")
        for key in ("schedule", "parentSchedule", "childSchedule"):
            value = payload.get(key)
            if value is not None and not (isinstance(value, list) and all(isinstance(e, dict) for e in value)):
                raise CommandError(f"{key} must be a list of objects")

        if "parentSchedule" in payload or "childSchedule" in payload:
            result = validate_hierarchical_working_hours(
                payload.get("parentSchedule") or [],
                payload.get("childSchedule") or [],
                parent_label=payload.get("parentLabel"),
                child_label=payload.get("childLabel"),
            )
        else:
            result = validate_working_hours(payload.get("schedule") or [])

        for error in result.errors:
            self.stdout.write(self.style.ERROR(error))
        if not result.is_valid:
            raise CommandError(f"{len(result.errors)} working-hours error(s)")
        self.stdout.write(self.style.SUCCESS("Working hours are valid."))
