"""
Step definitions for Domain Records Manager scenarios.
"""

import logging

from behave import given, when, then

from domain_records_manager.core.record_manager import DomainRecordManager
from domain_records_manager.core.records import DomainRecord, RecordType
from domain_records_manager.core.resource_data import ResourceData
from domain_records_manager.errors import DomainRecordsError, RemoteWriteError
from domain_records_manager.providers.registrar_client import RegistrarClient


class _WarningCollector(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.WARNING)
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def _split(values):
    return [value.strip() for value in values.split(",") if value.strip()]


def _records_from_table(table):
    return [
        DomainRecord(
            name=row["name"],
            type=RecordType.parse(row["type"]),
            data=row["data"],
            ttl=int(row["ttl"]),
            priority=int(row["priority"]),
        )
        for row in table
    ]


def _run(context, operation, *args):
    collector = _WarningCollector()
    manager_logger = logging.getLogger("domain_records_manager.core.record_manager")
    manager_logger.addHandler(collector)
    try:
        context.result = operation(*args)
        context.error = None
    except DomainRecordsError as e:
        context.error = e
    finally:
        manager_logger.removeHandler(collector)
    context.warnings = collector.messages


@given("the Domain Records Manager is configured with the mock registrar")
def step_configure(context):
    """Configure the manager with an in-memory registrar."""
    context.client = RegistrarClient(context.test_config)
    context.provider = context.client.provider
    context.manager = DomainRecordManager(context.client)


@given('the registrar hosts "{domain}" with ID {domain_id:d}')
def step_registrar_domain(context, domain, domain_id):
    context.provider.add_domain(domain, domain_id)


@given('the registrar records for "{domain}" are:')
def step_registrar_records(context, domain):
    context.provider.records[domain] = _records_from_table(context.table)


@given('the desired state for "{domain}" has addresses "{addresses}"')
def step_desired_addresses(context, domain, addresses):
    context.fields["domain"] = domain
    context.fields["addresses"] = _split(addresses)


@given('the desired state for "{domain}" has nameservers "{nameservers}"')
def step_desired_domain_nameservers(context, domain, nameservers):
    context.fields["domain"] = domain
    context.fields["nameservers"] = _split(nameservers)


@given('the desired state has nameservers "{nameservers}"')
def step_desired_nameservers(context, nameservers):
    context.fields["nameservers"] = _split(nameservers)


@given('the desired state has a "{record_type}" record "{name}" pointing to "{data}" with TTL {ttl:d}')
def step_desired_record(context, record_type, name, data, ttl):
    context.fields.setdefault("record", []).append(
        {"name": name, "type": record_type, "data": data, "ttl": ttl, "priority": 0}
    )


@given('the registrar rejects the next write with "{status}" "{code}"')
def step_reject_next_write(context, status, code):
    context.provider.fail_next_write(
        RemoteWriteError("Registrar rejected the records", status_code=int(status), code=code)
    )


@when("I apply the desired state")
def step_apply(context):
    context.data = ResourceData(context.fields)
    _run(context, context.manager.update, context.data)


@when("I delete the domain records")
def step_delete(context):
    context.data = ResourceData(context.fields)
    _run(context, context.manager.delete, context.data)


@when('I read the domain "{domain}"')
def step_read(context, domain):
    context.data = ResourceData({"domain": domain})
    _run(context, context.manager.read, context.data)


@when('I import "{identifier}"')
def step_import(context, identifier):
    _run(context, context.manager.import_state, identifier)
    context.data = context.result


@then("the operation succeeds")
def step_succeeds(context):
    assert context.error is None, f"Unexpected error: {context.error}"


@then('the operation fails with "{text}"')
def step_fails(context, text):
    assert context.error is not None, "Expected the operation to fail"
    assert text in str(context.error), f"'{text}' not in '{context.error}'"


@then("the pushed records are:")
def step_pushed_records(context):
    expected = _records_from_table(context.table)
    actual = context.provider.writes[-1]
    assert actual == expected, f"Pushed {actual}, expected {expected}"


@then("nothing was pushed to the registrar")
def step_nothing_pushed(context):
    assert context.provider.writes == [], f"Unexpected writes: {context.provider.writes}"


@then('a warning mentions "{text}"')
def step_warning(context, text):
    assert any(text in message for message in context.warnings), context.warnings


@then('the resource identifier is "{resource_id}"')
def step_resource_id(context, resource_id):
    assert context.data.id == resource_id, f"Identifier is {context.data.id!r}"


@then('the addresses are "{addresses}"')
def step_addresses(context, addresses):
    assert context.data.get("addresses") == _split(addresses), context.data


@then('the nameservers are "{nameservers}"')
def step_nameservers(context, nameservers):
    assert context.data.get("nameservers") == _split(nameservers), context.data


@then("the explicit records are:")
def step_explicit_records(context):
    expected = [record.to_dict() for record in _records_from_table(context.table)]
    actual = context.data.get("record")
    assert actual == expected, f"Records {actual}, expected {expected}"
