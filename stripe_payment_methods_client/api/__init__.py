"""Contains methods for accessing the API"""


class API:
    def __init__(self, client):
        self.client = client
        self.payment_methods = PaymentMethodsAPI(client)


class PaymentMethodsAPI:
    def __init__(self, client):
        self.client = client

    def attach(self, payment_method_id, params, **kwargs):
        from .payment_methods import attach_a_payment_method
        return attach_a_payment_method.sync(payment_method_id, client=self.client, body=params, **kwargs)

    def detach(self, payment_method_id, **kwargs):
        from .payment_methods import detach_a_payment_method
        return detach_a_payment_method.sync(payment_method_id, client=self.client, **kwargs)

    def create_with_card(self, params, **kwargs):
        from .payment_methods import create_a_payment_method_with_card
        return create_a_payment_method_with_card.sync(client=self.client, body=params, **kwargs)

    def update_with_card(self, payment_method_id, params, **kwargs):
        from .payment_methods import update_a_payment_method_with_card
        return update_a_payment_method_with_card.sync(payment_method_id, client=self.client, body=params, **kwargs)

    def retrieve(self, payment_method_id, **kwargs):
        from .payment_methods import retrieve_a_payment_method
        return retrieve_a_payment_method.sync(payment_method_id, client=self.client, **kwargs)
