from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.shopfront.exceptions import NoProductsAvailable
from apps.shopfront.models import Customer, Enterprise, OrderCycle
from apps.shopfront.services.renderer import resolve_catalog
from .serializers import ShopfrontProductSerializer

# Query params that are not product filters
RESERVED_PARAMS = ['customer', 'page', 'per_page', 'format']


class ShopfrontProductsView(APIView):
    """
    Products a hub sells in an order cycle.

    GET /api/shopfront/hubs/<hub_id>/order-cycles/<order_cycle_id>/products/

    Query params:
    - customer: Optional, applies the hub's tag rules for that customer
    - page, per_page: Pagination
    - Any product filter (name_cont, description_cont, with_properties,
      supplier_in, primary_category_in, with_variants_supplier_properties)
    """
    permission_classes = [AllowAny]

    def get(self, request, hub_id, order_cycle_id):
        try:
            hub = Enterprise.objects.get(pk=hub_id, is_distributor=True)
        except Enterprise.DoesNotExist:
            return Response(
                {'error': 'Hub not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        try:
            order_cycle = OrderCycle.objects.get(pk=order_cycle_id)
        except OrderCycle.DoesNotExist:
            return Response(
                {'error': 'Order cycle not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        # A cycle the hub does not distribute in leaves the hub without a shop
        if not order_cycle.distributors().filter(pk=hub.pk).exists():
            order_cycle = None

        customer = None
        customer_id = request.query_params.get('customer')
        if customer_id:
            try:
                customer = Customer.objects.get(pk=customer_id, enterprise=hub)
            except (Customer.DoesNotExist, ValueError):
                return Response(
                    {'error': 'Customer not found'},
                    status=status.HTTP_404_NOT_FOUND
                )

        filter_params = request.query_params.copy()
        for key in RESERVED_PARAMS:
            filter_params.pop(key, None)

        try:
            result = resolve_catalog(
                hub,
                order_cycle,
                customer,
                filter_params=filter_params,
                page=request.query_params.get('page') or 1,
                per_page=request.query_params.get('per_page'),
            )
        except NoProductsAvailable as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except ValueError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        serializer = ShopfrontProductSerializer(
            result.products,
            many=True,
            context={'request': request, 'variants': result.variants_by_product},
        )
        return Response({
            'products': serializer.data,
            'total_available': result.total_available,
            'page': result.page,
            'per_page': result.per_page,
        })
