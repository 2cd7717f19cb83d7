# pos_backend/orders/models.py
from datetime import datetime
from pos_backend.init_db import db

class CashierOrder(db.Model):
    __tablename__ = 'cashier_orders'
    id = db.Column(db.Integer, primary_key=True)
    order_no = db.Column(db.Integer, nullable=False)
    customer_ph_no = db.Column(db.BigInteger, nullable=False, index=True)
    product_id = db.Column(db.Integer, nullable=False)
    product_name = db.Column(db.String(255), nullable=False)
    food_amount = db.Column(db.Float, nullable=False)
    product_category = db.Column(db.String(100), nullable=False)
    date = db.Column(db.DateTime, nullable=False)
    payment_by = db.Column(db.Integer, nullable=False)
    payment_for = db.Column(db.Integer, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'orderNo': self.order_no,
            'customerPhNo': self.customer_ph_no,
            'productId': self.product_id,
            'productName': self.product_name,
            'foodamount': self.food_amount,
            'productCategory': self.product_category,
            'date': self.date.isoformat(),
            'paymentby': self.payment_by,
            'paymentfor': self.payment_for,
        }

class Order(db.Model):
    __tablename__ = 'orders'
    id = db.Column(db.Integer, primary_key=True)
    # Ordered list of {id, name, price, quantity} documents
    items = db.Column(db.JSON, nullable=False, default=list)
    total = db.Column(db.Float, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'items': self.items,
            'total': self.total,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
