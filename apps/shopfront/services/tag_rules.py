"""
Hub tag rules narrowing which variants a shopper can see.
"""

import logging

from apps.shopfront.models import Tag, TagRule, Variant

logger = logging.getLogger(__name__)


class ProductTagRulesFilterer:
    """
    Apply the hub's tag rules to a variant queryset.

    - Default rules hide the variants carrying one of their variant tags.
    - Rules for the customer's tags either show those variants again or
      hide more of them.
    A hub without rules leaves the queryset untouched.
    """

    def __init__(self, distributor, customer, variants):
        self.distributor = distributor
        self.customer = customer
        self.variants = variants

    def call(self):
        rules = TagRule.objects.filter(enterprise=self.distributor)
        if not rules.exists():
            return self.variants

        default_hidden = self._variant_tag_ids(
            rules.filter(is_default=True, matched_variants_visibility=TagRule.HIDDEN)
        )
        customer_rules = self._customer_rules(rules)
        customer_visible = self._variant_tag_ids(
            customer_rules.filter(matched_variants_visibility=TagRule.VISIBLE)
        )
        customer_hidden = self._variant_tag_ids(
            customer_rules.filter(matched_variants_visibility=TagRule.HIDDEN)
        )

        variants = self.variants
        if default_hidden:
            hidden_by_default = Variant.objects.filter(tags__in=default_hidden)
            if customer_visible:
                hidden_by_default = hidden_by_default.exclude(tags__in=customer_visible)
            variants = variants.exclude(pk__in=hidden_by_default.values('pk'))
        if customer_hidden:
            variants = variants.exclude(
                pk__in=Variant.objects.filter(tags__in=customer_hidden).values('pk')
            )

        logger.debug(
            "Tag rules for hub %s: hidden by default %s, shown %s, hidden for customer %s",
            self.distributor.pk, default_hidden, customer_visible, customer_hidden,
        )
        return variants

    def _customer_rules(self, rules):
        if self.customer is None:
            return rules.none()
        return rules.filter(
            is_default=False,
            preferred_customer_tags__in=self.customer.tags.all(),
        ).distinct()

    @staticmethod
    def _variant_tag_ids(rules):
        return list(
            Tag.objects.filter(variant_tag_rules__in=rules).values_list('pk', flat=True).distinct()
        )
