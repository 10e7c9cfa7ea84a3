#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pruebas del reparto de experiencia en proponentes plurales
"""

import unittest

from evaluador.experience import ExperienceApportionment
from evaluador.models import Contract, Partner, Proponent


def contract_for(contributor, adjusted_value):
    return Contract(experience_contributor=contributor, adjusted_value=adjusted_value)


class TestExperienceApportionment(unittest.TestCase):

    def setUp(self):
        self.apportionment = ExperienceApportionment()

    def plural(self, partners, contracts):
        return Proponent(
            name="Consorcio",
            is_plural=True,
            partners=[Partner(name=name, percentage=50) for name in partners],
            contractors=contracts,
        )

    def test_partner_without_contracts_gets_zero(self):
        """A sin contratos y B con todo -> {A: 0, B: 100}"""
        proponent = self.plural(["A", "B"], [contract_for("B", 80)])

        shares = self.apportionment.compute_partner_shares(proponent)

        self.assertEqual(shares, {"A": 0, "B": 100})
        self.assertTrue(self.apportionment.meets_disability_threshold(proponent, "B"))
        self.assertFalse(self.apportionment.meets_disability_threshold(proponent, "A"))

    def test_shares_sum_to_100(self):
        proponent = self.plural(
            ["A", "B", "C"],
            [contract_for("A", 30), contract_for("B", 45.5), contract_for("C", 24.5), contract_for("A", 7)],
        )
        shares = self.apportionment.compute_partner_shares(proponent)
        self.assertAlmostEqual(sum(shares.values()), 100)
        self.assertAlmostEqual(shares["A"], 37 / 107 * 100)

    def test_threshold_is_inclusive(self):
        proponent = self.plural(["A", "B"], [contract_for("A", 40), contract_for("B", 60)])
        self.assertTrue(self.apportionment.meets_disability_threshold(proponent, "A"))
        self.assertFalse(ExperienceApportionment(50).meets_disability_threshold(proponent, "A"))

    def test_unattributed_contracts_count_in_total(self):
        proponent = self.plural(["A"], [contract_for("A", 50), contract_for("Otro", 50)])
        self.assertEqual(self.apportionment.compute_partner_shares(proponent), {"A": 50})

    def test_exact_name_match(self):
        proponent = self.plural(["Socio A"], [contract_for("socio a", 10)])
        self.assertEqual(self.apportionment.compute_partner_shares(proponent), {"Socio A": 0})

    def test_no_contracts(self):
        self.assertEqual(self.apportionment.compute_partner_shares(self.plural(["A"], [])), {})

    def test_zero_total_experience(self):
        proponent = self.plural(["A", "B"], [contract_for("A", 0), contract_for("B", 0)])
        self.assertEqual(self.apportionment.compute_partner_shares(proponent), {})
        self.assertEqual(self.apportionment.get_partner_percentage(proponent, "A"), 0)
        self.assertFalse(self.apportionment.meets_disability_threshold(proponent, "A"))

    def test_single_proponent(self):
        proponent = Proponent(name="Constructora", contractors=[contract_for("Constructora", 100)])
        self.assertEqual(self.apportionment.compute_partner_shares(proponent), {})

    def test_unknown_partner(self):
        proponent = self.plural(["A"], [contract_for("A", 10)])
        self.assertEqual(self.apportionment.get_partner_percentage(proponent, "Z"), 0)

    def test_contributor_options(self):
        self.assertEqual(
            ExperienceApportionment.contributor_options(self.plural(["A", "B"], [])),
            ["A", "B"],
        )
        self.assertEqual(
            ExperienceApportionment.contributor_options(Proponent(number="3", name="Constructora")),
            ["3. Constructora"],
        )
        self.assertEqual(
            ExperienceApportionment.contributor_options(Proponent(name="Constructora")),
            ["Constructora"],
        )


if __name__ == "__main__":
    unittest.main(verbosity=2)
