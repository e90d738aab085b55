import tkinter as tk
from tkinter import ttk, messagebox

from utils.logger import setup_logger
from utils.forms import FormError, require_text, parse_cost, parse_quantity, require_choice
from data.repository import DataRepository
from services.catalog_service import ServiceCatalogStore
from services.customer_service import CustomerStore
from services.order_service import OrderStore
from models.service_offering import ServiceOffering
from models.customer import Customer
from models.order import ORDER_STATUSES, PAYMENT_STATUSES


def clear_entries(*entries):
    for e in entries:
        e.delete(0, tk.END)


def fill_entry(entry, value):
    entry.delete(0, tk.END)
    entry.insert(0, value)


class TileServiceApp:
    def __init__(self, root: tk.Tk):
        # core stores / data
        self.root = root
        self.root.title("TileMaster Pro")
        self.root.geometry("1000x650")

        self.logger = setup_logger()
        self.repo = DataRepository()

        # Each store loads its full collection once, here
        self.catalog = ServiceCatalogStore(self.repo)
        self.customers = CustomerStore(self.repo)
        self.orders = OrderStore(self.repo)

        # id of the record currently loaded into each edit form (None = adding)
        self.editing_service_id = None
        self.editing_customer_id = None
        self.editing_order_id = None

        # notebook layout
        self.notebook = ttk.Notebook(self.root)
        self.notebook.pack(fill="both", expand=True)

        self.services_frame = ttk.Frame(self.notebook)
        self.customers_frame = ttk.Frame(self.notebook)
        self.orders_frame = ttk.Frame(self.notebook)

        self.notebook.add(self.services_frame, text="Services")
        self.notebook.add(self.customers_frame, text="Customers")
        self.notebook.add(self.orders_frame, text="Orders")

        self.build_services_tab()
        self.build_customers_tab()
        self.build_orders_tab()

        # Order form pickers depend on the other tabs' data
        self.notebook.bind("<<NotebookTabChanged>>", self.on_tab_changed)

        # initial fills
        self.refresh_services_table()
        self.refresh_customers_table()
        self.refresh_orders_table()

    def on_tab_changed(self, event=None):
        self.refresh_order_pickers()

    def confirm_delete(self, what: str) -> bool:
        return messagebox.askyesno(
            "Confirm Delete",
            f"Are you sure you want to delete this {what}? This action cannot be undone."
        )

    @staticmethod
    def selected_id(tree: ttk.Treeview):
        # Tree rows use the record id as iid
        selection = tree.selection()
        return selection[0] if selection else None

    # TAB 1: SERVICES

    def build_services_tab(self):
        top_frame = ttk.LabelFrame(self.services_frame, text="Tile Services")
        top_frame.pack(fill="both", expand=True, padx=10, pady=10)

        columns = ("name", "type", "material", "cost", "labor", "total", "time")
        self.services_tree = ttk.Treeview(
            top_frame,
            columns=columns,
            show="headings",
            height=12
        )
        self.services_tree.heading("name", text="Name")
        self.services_tree.heading("type", text="Type")
        self.services_tree.heading("material", text="Material")
        self.services_tree.heading("cost", text="Service Cost")
        self.services_tree.heading("labor", text="Labor Cost")
        self.services_tree.heading("total", text="Total Cost")
        self.services_tree.heading("time", text="Time Required")
        self.services_tree.column("name", width=180)
        self.services_tree.column("type", width=110)
        self.services_tree.column("material", width=110)
        self.services_tree.column("cost", width=100, anchor="e")
        self.services_tree.column("labor", width=100, anchor="e")
        self.services_tree.column("total", width=100, anchor="e")
        self.services_tree.column("time", width=120)
        self.services_tree.pack(fill="both", expand=True, padx=5, pady=5)
        self.services_tree.bind("<<TreeviewSelect>>", self.on_service_selected)

        refresh_btn = ttk.Button(
            top_frame,
            text="Refresh",
            command=self.refresh_services_table
        )
        refresh_btn.pack(pady=(0, 5))

        form = ttk.LabelFrame(self.services_frame, text="Tile Service Details")
        form.pack(fill="x", padx=10, pady=(0, 10))

        ttk.Label(form, text="Name:").grid(row=0, column=0, sticky="e", padx=5, pady=5)
        ttk.Label(form, text="Type:").grid(row=0, column=2, sticky="e", padx=5, pady=5)
        ttk.Label(form, text="Material:").grid(row=0, column=4, sticky="e", padx=5, pady=5)
        ttk.Label(form, text="Service Cost:").grid(row=1, column=0, sticky="e", padx=5, pady=5)
        ttk.Label(form, text="Labor Cost:").grid(row=1, column=2, sticky="e", padx=5, pady=5)
        ttk.Label(form, text="Time Required:").grid(row=1, column=4, sticky="e", padx=5, pady=5)
        ttk.Label(form, text="Description:").grid(row=2, column=0, sticky="e", padx=5, pady=5)

        self.svc_name_entry = ttk.Entry(form, width=20)
        self.svc_type_entry = ttk.Entry(form, width=15)
        self.svc_material_entry = ttk.Entry(form, width=15)
        self.svc_cost_entry = ttk.Entry(form, width=10)
        self.svc_labor_entry = ttk.Entry(form, width=10)
        self.svc_time_entry = ttk.Entry(form, width=15)
        self.svc_desc_entry = ttk.Entry(form, width=60)

        self.svc_name_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)
        self.svc_type_entry.grid(row=0, column=3, sticky="w", padx=5, pady=5)
        self.svc_material_entry.grid(row=0, column=5, sticky="w", padx=5, pady=5)
        self.svc_cost_entry.grid(row=1, column=1, sticky="w", padx=5, pady=5)
        self.svc_labor_entry.grid(row=1, column=3, sticky="w", padx=5, pady=5)
        self.svc_time_entry.grid(row=1, column=5, sticky="w", padx=5, pady=5)
        self.svc_desc_entry.grid(row=2, column=1, columnspan=5, sticky="w", padx=5, pady=5)

        btns = ttk.Frame(form)
        btns.grid(row=0, column=6, rowspan=3, sticky="n", padx=10, pady=5)
        ttk.Button(btns, text="Add Service", command=self.gui_add_service).pack(fill="x", pady=2)
        ttk.Button(btns, text="Save Changes", command=self.gui_update_service).pack(fill="x", pady=2)
        ttk.Button(btns, text="Delete", command=self.gui_delete_service).pack(fill="x", pady=2)
        ttk.Button(btns, text="Clear", command=self.clear_service_form).pack(fill="x", pady=2)

    def service_form_entries(self):
        return (
            self.svc_name_entry, self.svc_type_entry, self.svc_material_entry,
            self.svc_cost_entry, self.svc_labor_entry, self.svc_time_entry,
            self.svc_desc_entry,
        )

    def refresh_services_table(self):
        for row in self.services_tree.get_children():
            self.services_tree.delete(row)

        for s in self.catalog.list():
            self.services_tree.insert(
                "",
                "end",
                iid=s.id,
                values=(
                    s.name,
                    s.type,
                    s.material,
                    f"${s.cost:.2f}",
                    f"${s.labor_cost:.2f}",
                    f"${self.catalog.total_cost(s):.2f}",
                    s.time_required,
                )
            )
        self.logger.info("GUI: refreshed services table")

    def read_service_form(self) -> dict:
        # Description is the only optional field
        return {
            "name": require_text("Name", self.svc_name_entry.get()),
            "type": require_text("Type", self.svc_type_entry.get()),
            "material": require_text("Material", self.svc_material_entry.get()),
            "cost": parse_cost("Service Cost", self.svc_cost_entry.get()),
            "labor_cost": parse_cost("Labor Cost", self.svc_labor_entry.get()),
            "time_required": require_text("Time Required", self.svc_time_entry.get()),
            "description": self.svc_desc_entry.get().strip(),
        }

    def on_service_selected(self, event=None):
        service_id = self.selected_id(self.services_tree)
        if service_id is None:
            return
        s = self.catalog.get(service_id)
        self.editing_service_id = s.id
        fill_entry(self.svc_name_entry, s.name)
        fill_entry(self.svc_type_entry, s.type)
        fill_entry(self.svc_material_entry, s.material)
        fill_entry(self.svc_cost_entry, str(s.cost))
        fill_entry(self.svc_labor_entry, str(s.labor_cost))
        fill_entry(self.svc_time_entry, s.time_required)
        fill_entry(self.svc_desc_entry, s.description)

    def clear_service_form(self):
        self.editing_service_id = None
        clear_entries(*self.service_form_entries())
        self.services_tree.selection_remove(self.services_tree.selection())

    def gui_add_service(self):
        try:
            fields = self.read_service_form()
        except FormError as e:
            messagebox.showerror("Error", str(e))
            return

        service = self.catalog.add(ServiceOffering(**fields))
        self.logger.info(
            f"GUI: added service {service.id} ({service.name}), "
            f"cost={service.cost}, labor={service.labor_cost}"
        )

        self.clear_service_form()
        self.refresh_services_table()
        messagebox.showinfo("Success", "Service added.")

    def gui_update_service(self):
        if self.editing_service_id is None:
            messagebox.showerror("Error", "Select a service to edit first.")
            return
        try:
            fields = self.read_service_form()
        except FormError as e:
            messagebox.showerror("Error", str(e))
            return

        updated = self.catalog.update(ServiceOffering(id=self.editing_service_id, **fields))
        if not updated:
            messagebox.showerror("Error", "That service no longer exists.")
        self.logger.info(f"GUI: update service {self.editing_service_id} -> {updated}")

        self.clear_service_form()
        self.refresh_services_table()

    def gui_delete_service(self):
        service_id = self.selected_id(self.services_tree)
        if service_id is None:
            messagebox.showerror("Error", "Select a service to delete.")
            return
        if not self.confirm_delete("service"):
            return

        self.catalog.delete(service_id)
        self.logger.info(f"GUI: deleted service {service_id}")
        self.clear_service_form()
        self.refresh_services_table()

    # TAB 2: CUSTOMERS (list + form + order history)

    def build_customers_tab(self):
        outer = ttk.LabelFrame(self.customers_frame, text="Customers")
        outer.pack(fill="both", expand=True, padx=10, pady=10)

        table_frame = ttk.Frame(outer)
        table_frame.pack(fill="both", expand=True, padx=5, pady=5)

        columns = ("name", "contact", "address")
        self.customers_tree = ttk.Treeview(
            table_frame,
            columns=columns,
            show="headings",
            height=10
        )
        self.customers_tree.heading("name", text="Name")
        self.customers_tree.heading("contact", text="Contact Info")
        self.customers_tree.heading("address", text="Address")

        self.customers_tree.column("name", width=180)
        self.customers_tree.column("contact", width=200)
        self.customers_tree.column("address", width=300)

        self.customers_tree.pack(side="left", fill="both", expand=True)
        self.customers_tree.bind("<<TreeviewSelect>>", self.on_customer_selected)

        # right: orders whose customer name matches the selected customer
        history_frame = ttk.LabelFrame(table_frame, text="Order History")
        history_frame.pack(side="left", fill="y", padx=(10, 0))
        self.history_listbox = tk.Listbox(history_frame, width=40, height=10)
        self.history_listbox.pack(fill="both", expand=True, padx=5, pady=5)

        refresh_btn = ttk.Button(
            outer,
            text="Refresh Customers",
            command=self.refresh_customers_table
        )
        refresh_btn.pack(pady=(0, 10))

        form = ttk.LabelFrame(outer, text="Customer Details")
        form.pack(fill="x", padx=5, pady=5)

        ttk.Label(form, text="Name:").grid(row=0, column=0, sticky="e", padx=5, pady=5)
        ttk.Label(form, text="Contact Info:").grid(row=0, column=2, sticky="e", padx=5, pady=5)
        ttk.Label(form, text="Address:").grid(row=1, column=0, sticky="e", padx=5, pady=5)

        self.cust_name_entry = ttk.Entry(form, width=20)
        self.cust_contact_entry = ttk.Entry(form, width=25)
        self.cust_address_entry = ttk.Entry(form, width=55)

        self.cust_name_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)
        self.cust_contact_entry.grid(row=0, column=3, sticky="w", padx=5, pady=5)
        self.cust_address_entry.grid(row=1, column=1, columnspan=3, sticky="w", padx=5, pady=5)

        btns = ttk.Frame(form)
        btns.grid(row=0, column=4, rowspan=2, sticky="n", padx=10, pady=5)
        ttk.Button(btns, text="Add Customer", command=self.gui_add_customer).pack(fill="x", pady=2)
        ttk.Button(btns, text="Save Changes", command=self.gui_update_customer).pack(fill="x", pady=2)
        ttk.Button(btns, text="Delete", command=self.gui_delete_customer).pack(fill="x", pady=2)
        ttk.Button(btns, text="Clear", command=self.clear_customer_form).pack(fill="x", pady=2)

    def refresh_customers_table(self):
        for row in self.customers_tree.get_children():
            self.customers_tree.delete(row)
        self.history_listbox.delete(0, tk.END)

        customers = self.customers.list()
        if not customers:
            self.logger.info("GUI: refreshed customers table (no customers yet)")
            return

        for c in customers:
            self.customers_tree.insert(
                "",
                "end",
                iid=c.id,
                values=(c.name, c.contact_info, c.address)
            )

        self.logger.info("GUI: refreshed customers table")

    def read_customer_form(self) -> dict:
        return {
            "name": require_text("Name", self.cust_name_entry.get()),
            "contact_info": require_text("Contact Info", self.cust_contact_entry.get()),
            "address": require_text("Address", self.cust_address_entry.get()),
        }

    def on_customer_selected(self, event=None):
        customer_id = self.selected_id(self.customers_tree)
        if customer_id is None:
            return
        c = self.customers.get(customer_id)
        self.editing_customer_id = c.id
        fill_entry(self.cust_name_entry, c.name)
        fill_entry(self.cust_contact_entry, c.contact_info)
        fill_entry(self.cust_address_entry, c.address)
        self.show_order_history(c)

    def show_order_history(self, customer: Customer):
        self.history_listbox.delete(0, tk.END)
        history = self.customers.order_history(customer, self.orders.list())
        if not history:
            self.history_listbox.insert(tk.END, "No orders yet.")
            return
        for o in history:
            self.history_listbox.insert(
                tk.END,
                f"{o.order_date:%Y-%m-%d}  {o.service_name} x {o.quantity}  "
                f"${o.total_cost:.2f}  {o.status}/{o.payment_status}"
            )

    def clear_customer_form(self):
        self.editing_customer_id = None
        clear_entries(self.cust_name_entry, self.cust_contact_entry, self.cust_address_entry)
        self.customers_tree.selection_remove(self.customers_tree.selection())
        self.history_listbox.delete(0, tk.END)

    def gui_add_customer(self):
        try:
            fields = self.read_customer_form()
        except FormError as e:
            messagebox.showerror("Error", str(e))
            return

        customer = self.customers.add(Customer(**fields))
        self.logger.info(f"GUI: added customer {customer.id} ({customer.name})")

        self.clear_customer_form()
        self.refresh_customers_table()
        messagebox.showinfo("Success", "Customer added.")

    def gui_update_customer(self):
        if self.editing_customer_id is None:
            messagebox.showerror("Error", "Select a customer to edit first.")
            return
        try:
            fields = self.read_customer_form()
        except FormError as e:
            messagebox.showerror("Error", str(e))
            return

        # Renaming does not touch orders that carry the old name
        updated = self.customers.update(Customer(id=self.editing_customer_id, **fields))
        if not updated:
            messagebox.showerror("Error", "That customer no longer exists.")
        self.logger.info(f"GUI: update customer {self.editing_customer_id} -> {updated}")

        self.clear_customer_form()
        self.refresh_customers_table()

    def gui_delete_customer(self):
        customer_id = self.selected_id(self.customers_tree)
        if customer_id is None:
            messagebox.showerror("Error", "Select a customer to delete.")
            return
        if not self.confirm_delete("customer"):
            return

        # No cascade: their orders stay, with the now dangling name
        self.customers.delete(customer_id)
        self.logger.info(f"GUI: deleted customer {customer_id}")
        self.clear_customer_form()
        self.refresh_customers_table()

    # TAB 3: ORDERS

    def build_orders_tab(self):
        top_frame = ttk.LabelFrame(self.orders_frame, text="Orders")
        top_frame.pack(fill="both", expand=True, padx=10, pady=10)

        columns = ("service", "qty", "total", "customer", "date", "status", "payment")
        self.orders_tree = ttk.Treeview(
            top_frame,
            columns=columns,
            show="headings",
            height=12
        )
        self.orders_tree.heading("service", text="Service")
        self.orders_tree.heading("qty", text="Quantity")
        self.orders_tree.heading("total", text="Total")
        self.orders_tree.heading("customer", text="Customer")
        self.orders_tree.heading("date", text="Date")
        self.orders_tree.heading("status", text="Status")
        self.orders_tree.heading("payment", text="Payment")
        self.orders_tree.column("service", width=180)
        self.orders_tree.column("qty", width=70, anchor="center")
        self.orders_tree.column("total", width=100, anchor="e")
        self.orders_tree.column("customer", width=160)
        self.orders_tree.column("date", width=100, anchor="center")
        self.orders_tree.column("status", width=90, anchor="center")
        self.orders_tree.column("payment", width=90, anchor="center")
        self.orders_tree.pack(fill="both", expand=True, padx=5, pady=5)
        self.orders_tree.bind("<<TreeviewSelect>>", self.on_order_selected)

        refresh_btn = ttk.Button(
            top_frame,
            text="Refresh",
            command=self.refresh_orders_table
        )
        refresh_btn.pack(pady=(0, 5))

        form = ttk.LabelFrame(self.orders_frame, text="Order Details")
        form.pack(fill="x", padx=10, pady=(0, 10))

        ttk.Label(form, text="Service Name:").grid(row=0, column=0, sticky="e", padx=5, pady=5)
        ttk.Label(form, text="Quantity:").grid(row=0, column=2, sticky="e", padx=5, pady=5)
        ttk.Label(form, text="Customer:").grid(row=0, column=4, sticky="e", padx=5, pady=5)
        ttk.Label(form, text="Order Status:").grid(row=1, column=0, sticky="e", padx=5, pady=5)
        ttk.Label(form, text="Payment Status:").grid(row=1, column=2, sticky="e", padx=5, pady=5)

        # Service name stays free text; the list only offers suggestions
        self.order_service_combo = ttk.Combobox(form, width=22)
        self.order_qty_entry = ttk.Entry(form, width=8)
        self.order_customer_combo = ttk.Combobox(form, width=22, state="readonly")
        self.order_status_combo = ttk.Combobox(
            form, width=12, state="readonly", values=ORDER_STATUSES
        )
        self.order_payment_combo = ttk.Combobox(
            form, width=12, state="readonly", values=PAYMENT_STATUSES
        )
        self.order_status_combo.set(ORDER_STATUSES[0])
        self.order_payment_combo.set(PAYMENT_STATUSES[0])

        self.order_service_combo.grid(row=0, column=1, sticky="w", padx=5, pady=5)
        self.order_qty_entry.grid(row=0, column=3, sticky="w", padx=5, pady=5)
        self.order_customer_combo.grid(row=0, column=5, sticky="w", padx=5, pady=5)
        self.order_status_combo.grid(row=1, column=1, sticky="w", padx=5, pady=5)
        self.order_payment_combo.grid(row=1, column=3, sticky="w", padx=5, pady=5)

        self.order_total_label = ttk.Label(
            form, text=f"Flat rate: ${self.orders.flat_unit_rate:.2f} per unit", foreground="gray"
        )
        self.order_total_label.grid(row=1, column=4, columnspan=2, sticky="w", padx=5, pady=5)

        btns = ttk.Frame(form)
        btns.grid(row=0, column=6, rowspan=2, sticky="n", padx=10, pady=5)
        ttk.Button(btns, text="Add Order", command=self.gui_add_order).pack(fill="x", pady=2)
        ttk.Button(btns, text="Save Changes", command=self.gui_update_order).pack(fill="x", pady=2)
        ttk.Button(btns, text="Delete", command=self.gui_delete_order).pack(fill="x", pady=2)
        ttk.Button(btns, text="Clear", command=self.clear_order_form).pack(fill="x", pady=2)

    def refresh_order_pickers(self):
        self.order_service_combo.config(values=[s.name for s in self.catalog.list()])
        self.order_customer_combo.config(values=self.customers.names())

    def refresh_orders_table(self):
        for row in self.orders_tree.get_children():
            self.orders_tree.delete(row)

        for o in self.orders.list():
            self.orders_tree.insert(
                "",
                "end",
                iid=o.id,
                values=(
                    o.service_name,
                    o.quantity,
                    f"${o.total_cost:.2f}",
                    o.customer_name,
                    f"{o.order_date:%Y-%m-%d}",
                    o.status,
                    o.payment_status,
                )
            )
        self.refresh_order_pickers()
        self.logger.info("GUI: refreshed orders table")

    def read_order_form(self) -> dict:
        return {
            "service_name": require_text("Service Name", self.order_service_combo.get()),
            "quantity": parse_quantity(self.order_qty_entry.get()),
            "customer_name": require_text("Customer", self.order_customer_combo.get()),
            "status": require_choice("Order Status", self.order_status_combo.get(), ORDER_STATUSES),
            "payment_status": require_choice(
                "Payment Status", self.order_payment_combo.get(), PAYMENT_STATUSES
            ),
        }

    def on_order_selected(self, event=None):
        order_id = self.selected_id(self.orders_tree)
        if order_id is None:
            return
        o = self.orders.get(order_id)
        self.editing_order_id = o.id
        self.order_service_combo.set(o.service_name)
        fill_entry(self.order_qty_entry, str(o.quantity))
        # the customer may have been deleted since; keep showing the stored name
        self.order_customer_combo.set(o.customer_name)
        self.order_status_combo.set(o.status)
        self.order_payment_combo.set(o.payment_status)

    def clear_order_form(self):
        self.editing_order_id = None
        self.order_service_combo.set("")
        self.order_qty_entry.delete(0, tk.END)
        self.order_customer_combo.set("")
        self.order_status_combo.set(ORDER_STATUSES[0])
        self.order_payment_combo.set(PAYMENT_STATUSES[0])
        self.orders_tree.selection_remove(self.orders_tree.selection())

    def gui_add_order(self):
        try:
            fields = self.read_order_form()
        except FormError as e:
            messagebox.showerror("Error", str(e))
            return

        order = self.orders.create(**fields)
        self.logger.info(
            f"GUI: added order {order.id} service={order.service_name}, "
            f"qty={order.quantity}, customer={order.customer_name}, total={order.total_cost}"
        )

        self.clear_order_form()
        self.refresh_orders_table()
        messagebox.showinfo("Success", f"Order added. Total: ${order.total_cost:.2f}")

    def gui_update_order(self):
        if self.editing_order_id is None:
            messagebox.showerror("Error", "Select an order to edit first.")
            return
        try:
            fields = self.read_order_form()
        except FormError as e:
            messagebox.showerror("Error", str(e))
            return

        current = self.orders.find(self.editing_order_id)
        if current is None:
            messagebox.showerror("Error", "That order no longer exists.")
            self.clear_order_form()
            self.refresh_orders_table()
            return

        for key, value in fields.items():
            setattr(current, key, value)
        self.orders.update(current)
        self.logger.info(f"GUI: updated order {current.id}")

        self.clear_order_form()
        self.refresh_orders_table()

    def gui_delete_order(self):
        order_id = self.selected_id(self.orders_tree)
        if order_id is None:
            messagebox.showerror("Error", "Select an order to delete.")
            return
        if not self.confirm_delete("order"):
            return

        self.orders.delete(order_id)
        self.logger.info(f"GUI: deleted order {order_id}")
        self.clear_order_form()
        self.refresh_orders_table()


def main():
    root = tk.Tk()
    app = TileServiceApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
