"""
DNS Manager - Applies declarative domain record sets to the registrar

This module ties the registrar client, the record lifecycle and the
state file together, and reports every operation on the console.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table

from ..errors import DomainRecordsError
from ..providers.registrar_client import RegistrarClient
from .record_manager import DomainRecordManager
from .records import DomainRecord
from .resource_data import ResourceData
from .state import StateStore

console = Console()
logger = logging.getLogger(__name__)


class DNSManager:
    """Main DNS management class that orchestrates the entire process."""

    def __init__(self, config: Dict, state_path: str = "domain_records_state.yaml"):
        """Initialize the DNS manager with configuration."""
        self.config = config
        self.registrar_client = RegistrarClient(config)
        self.record_manager = DomainRecordManager(self.registrar_client)
        self.state = StateStore(state_path)

    def _resource_data(self, fields: Dict) -> ResourceData:
        domain = fields.get("domain", "")
        return ResourceData(fields, resource_id=self.state.get_id(domain))

    def apply(
        self, domains: List[Dict], dry_run: bool = False, output_file: Optional[str] = None
    ) -> bool:
        """Apply the desired record set of every domain."""
        success = True
        plans = {}

        for fields in domains:
            domain = fields.get("domain", "")
            data = self._resource_data(fields)
            try:
                if dry_run:
                    plans[domain] = self.record_manager.plan(data)
                    self._display_records(domain, plans[domain])
                    continue

                if data.id:
                    self.record_manager.update(data)
                else:
                    self.record_manager.create(data)

                self.state.set(domain, data.id, data.get("customer"))
                console.print(f"[green]Applied records for {domain} (ID {data.id})[/green]")
            except DomainRecordsError as e:
                logger.error(f"Failed to apply records for {domain}: {e}")
                console.print(f"[red]Failed to apply {domain}: {e}[/red]")
                success = False

        if dry_run:
            console.print("[yellow]DRY RUN MODE - No changes were applied[/yellow]")
            if output_file:
                self._save_dry_run_output(plans, output_file)
                console.print(f"[green]Dry run output saved to: {output_file}[/green]")
        else:
            self.state.save()

        return success

    def show(self, domain: str, customer: str = "") -> bool:
        """Display the current records of a domain, grouped like the desired state."""
        fields = {"domain": domain, "customer": customer or self.state.get_customer(domain)}
        data = self._resource_data(fields)
        try:
            self.record_manager.read(data)
        except DomainRecordsError as e:
            logger.error(f"Failed to read {domain}: {e}")
            console.print(f"[red]Error: {e}[/red]")
            return False

        self._display_state(data)
        return True

    def destroy(self, domain: str, customer: str = "", nameservers: List[str] = None) -> bool:
        """
        Restore a domain to the default record set and forget it.

        Without explicit ``nameservers`` the domain keeps the nameservers
        the registrar currently holds for it.
        """
        customer = customer or self.state.get_customer(domain)
        fields = {"domain": domain, "customer": customer, "nameservers": list(nameservers or [])}
        data = self._resource_data(fields)
        try:
            if not fields["nameservers"]:
                data.set("nameservers", self.record_manager.current_nameservers(customer, domain))
            self.record_manager.delete(data)
        except DomainRecordsError as e:
            logger.error(f"Failed to restore {domain}: {e}")
            console.print(f"[red]Error: {e}[/red]")
            return False

        self.state.remove(domain)
        self.state.save()
        console.print(f"[green]Restored default records for {domain}[/green]")
        return True

    def import_domain(self, identifier: str, customer: str = "") -> bool:
        """Import an existing domain into the state file."""
        try:
            data = self.record_manager.import_state(identifier, customer)
        except DomainRecordsError as e:
            logger.error(f"Failed to import {identifier}: {e}")
            console.print(f"[red]Error: {e}[/red]")
            return False

        self.state.set(data.get("domain"), data.id, customer)
        self.state.save()
        self._display_state(data)
        return True

    def _display_records(self, domain: str, records: List[DomainRecord]):
        table = Table(title=f"Planned records for {domain}")
        table.add_column("Type", style="cyan")
        table.add_column("Name", style="magenta")
        table.add_column("Data", style="white")
        table.add_column("TTL", justify="right")
        table.add_column("Priority", justify="right")

        for record in records:
            table.add_row(
                record.type_name, record.name, record.data, str(record.ttl), str(record.priority)
            )

        console.print(table)

    def _display_state(self, data: ResourceData):
        table = Table(title=f"{data.get('domain')} (ID {data.id})")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("addresses", ", ".join(data.get("addresses", [])))
        table.add_row("nameservers", ", ".join(data.get("nameservers", [])))
        for record in data.get("record", []):
            table.add_row(
                "record",
                f"{record['type']} {record['name']} -> {record['data']} "
                f"(ttl={record['ttl']}, priority={record['priority']})",
            )

        console.print(table)

    def _save_dry_run_output(self, plans: Dict[str, List[DomainRecord]], output_file: str):
        """Save dry run output to a file."""
        try:
            with open(output_file, "w") as f:
                f.write("=" * 60 + "\n")
                f.write("DOMAIN RECORDS MANAGER - DRY RUN SUMMARY\n")
                f.write("=" * 60 + "\n\n")
                f.write(f"Timestamp: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")

                for domain, records in plans.items():
                    f.write(f"{domain} ({len(records)} records):\n")
                    f.write("-" * 20 + "\n")
                    for record in records:
                        f.write(
                            f"  {record.type_name:<6} {record.name:<20} -> {record.data} "
                            f"(ttl={record.ttl}, priority={record.priority})\n"
                        )
                    f.write("\n")

                f.write("=" * 60 + "\n")
                f.write("END OF DRY RUN SUMMARY\n")
                f.write("=" * 60 + "\n")

            logger.info(f"Dry run output saved to: {output_file}")
        except OSError as e:
            logger.error(f"Failed to save dry run output to {output_file}: {e}")
            console.print(f"[red]Warning: Failed to save dry run output to {output_file}: {e}[/red]")
