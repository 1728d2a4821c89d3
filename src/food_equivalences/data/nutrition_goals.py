"""Nutrition-goal catalog: guidance and food swaps per dietary objective."""

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from food_equivalences.domain.goals import (
    CategoryEquivalences,
    EquivalenceCategory,
    NutritionEquivalence,
    NutritionGoal,
    NutritionGoalData,
)

Category = EquivalenceCategory


def _equivalences(
    entries: Mapping[EquivalenceCategory, Sequence[NutritionEquivalence]],
) -> CategoryEquivalences:
    """Build a read-only mapping holding every category in canonical order."""
    return MappingProxyType(
        {category: tuple(entries.get(category, ())) for category in EquivalenceCategory}
    )


def _goal(  # noqa: PLR0913
    goal: NutritionGoal,
    *,
    title: str,
    icon: str,
    key_principles: Sequence[str],
    equivalences: Mapping[EquivalenceCategory, Sequence[NutritionEquivalence]],
    warning: str | None = None,
) -> NutritionGoalData:
    return NutritionGoalData(
        id=goal,
        title=title,
        icon=icon,
        key_principles=tuple(key_principles),
        equivalences=_equivalences(equivalences),
        warning=warning,
    )


_WEIGHT_LOSS = _goal(
    NutritionGoal.WEIGHT_LOSS,
    title="Perte de poids",
    icon="📉",
    key_principles=[
        "Priorité à la satiété",
        "Densité énergétique plus basse (plus de volume, moins de kcal par bouchée)",
        "Maintenir les protéines à chaque repas pour limiter la perte musculaire",
        "Travailler sur la qualité des glucides et des graisses (IG, fibres, AGPI AGMI)",
    ],
    equivalences={
        Category.FECULENTS: [
            NutritionEquivalence(
                base_food="Riz blanc",
                substitute="Riz basmati complet ou légumineuses mélangées",
                base_quantity="60 g riz blanc cru",
                substitute_quantity="50 g riz basmati complet + 20 g lentilles corail",
                interest="Plus de fibres, meilleure satiété, IG plus bas",
                keywords=("riz", "riz blanc", "riz standard"),
            ),
            NutritionEquivalence(
                base_food="Pâtes blanches",
                substitute="Pâtes complètes ou aux légumineuses",
                base_quantity="70 g pâtes blanches",
                substitute_quantity="70 g pâtes complètes ou pois chiches",
                interest="Plus de protéines et fibres, meilleure satiété",
                keywords=("pâtes", "pâtes blanches", "pâtes classiques"),
            ),
            NutritionEquivalence(
                base_food="Purée de pommes de terre au beurre",
                substitute="Purée pommes de terre + légumes",
                base_quantity="200 g purée classique",
                substitute_quantity=(
                    "150 g pommes de terre + 50 g carottes ou courgettes "
                    "+ 1 c. à café d'huile d'olive (au lieu de beurre)"
                ),
                interest="Plus de volume pour moins de calories",
                keywords=("purée", "purée pommes de terre", "purée beurre"),
            ),
        ],
        Category.MATIERES_GRASSES: [
            NutritionEquivalence(
                base_food="Beurre de cuisson",
                substitute="Huile d'olive ou colza",
                base_quantity="10 g beurre",
                substitute_quantity="7-8 g huile",
                interest="Moins de graisses saturées, meilleure qualité lipidique",
                keywords=("beurre", "beurre cuisson", "beurre de cuisson"),
            ),
            NutritionEquivalence(
                base_food="Crème fraîche",
                substitute="Yaourt grec ou fromage blanc",
                base_quantity="100 ml crème entière",
                substitute_quantity="100 g yaourt grec 5% ou fromage blanc",
                interest="Moins de gras, plus de protéines",
                keywords=("crème", "crème fraîche", "crème entière"),
            ),
        ],
        Category.DESSERTS: [
            NutritionEquivalence(
                base_food="Crème dessert industrielle",
                substitute="Yaourt nature + toppings",
                base_quantity="1 crème dessert",
                substitute_quantity=(
                    "1 yaourt nature + 1 c. à café de miel "
                    "+ 1 petite poignée de fruits"
                ),
                interest="Moins de sucre, plus de protéines, plus de fibres",
                keywords=("crème dessert", "dessert industriel", "dessert"),
            ),
            NutritionEquivalence(
                base_food="Viennoiserie",
                substitute="Pain + garniture",
                base_quantity="1 croissant",
                substitute_quantity=(
                    "1 tranche de pain complet + 10 g purée d'amande + 1 fruit"
                ),
                interest="Plus rassasiant, moins de graisses saturées",
                context="petit-déjeuner",
                keywords=("croissant", "viennoiserie", "brioche", "pain au chocolat"),
            ),
            NutritionEquivalence(
                base_food="Glace crème",
                substitute='"Nice cream" banane',
                base_quantity="100 g glace",
                substitute_quantity="100 g banane congelée mixée + un peu de lait",
                interest="Sucre venant du fruit, pas de graisses ajoutées",
                keywords=("glace", "crème glacée", "glace crème"),
            ),
        ],
        Category.GENERAL: [
            NutritionEquivalence(
                base_food="Repas sans légumes",
                substitute="Repas avec ½ assiette de légumes",
                base_quantity="Repas standard",
                substitute_quantity="Repas + légumes (½ assiette)",
                interest="Plus de volume, plus de fibres, meilleure satiété",
                context="repas",
                keywords=("légumes", "repas", "assiette"),
            ),
            NutritionEquivalence(
                base_food="Repas sans protéines",
                substitute="Repas avec protéines",
                base_quantity="Repas standard",
                substitute_quantity=(
                    "Repas + protéines (œufs, poissons, produits laitiers, "
                    "légumineuses, tofu...)"
                ),
                interest="Limite la perte musculaire, meilleure satiété",
                context="repas",
                keywords=("protéines", "repas"),
            ),
            NutritionEquivalence(
                base_food="Produits ultra transformés",
                substitute="Préparations maison simplifiées",
                base_quantity="Produit industriel",
                substitute_quantity="Version maison simple",
                interest=(
                    "Moins de sel, moins de graisses cachées, meilleur contrôle "
                    "des ingrédients"
                ),
                keywords=("produit transformé", "industriel", "préparé"),
            ),
            NutritionEquivalence(
                base_food="Boissons sucrées",
                substitute="Eau, eaux aromatisées maison, thé, café sans sucre",
                base_quantity="Boisson sucrée",
                substitute_quantity="Eau ou boisson non sucrée",
                interest="Réduction majeure des sucres et calories",
                keywords=("soda", "boisson sucrée", "jus"),
            ),
        ],
    },
)

_MUSCLE_GAIN = _goal(
    NutritionGoal.MUSCLE_GAIN,
    title="Prise de masse musculaire",
    icon="💪",
    key_principles=[
        "Apport protéique suffisant réparti sur la journée",
        "Ne pas avoir peur des glucides complexes (énergie pour s'entraîner)",
        "Avoir un léger surplus calorique contrôlé",
        "Favoriser des sources de graisses de bonne qualité",
    ],
    equivalences={
        Category.PROTEINES: [
            NutritionEquivalence(
                base_food="Jambon blanc seul",
                substitute="Jambon + féculent",
                base_quantity="2 tranches de jambon seules",
                substitute_quantity="2 tranches + 60 g de riz ou pâtes complètes",
                interest=(
                    "Meilleure construction musculaire grâce aux glucides + protéines"
                ),
                keywords=("jambon", "jambon blanc", "protéine seule"),
            ),
            NutritionEquivalence(
                base_food="Yaourt nature simple",
                substitute='Yaourt "boosté"',
                base_quantity="1 yaourt nature",
                substitute_quantity=(
                    "1 yaourt + 1 c. à soupe de poudre de lait ou skyr "
                    "+ 1 poignée de muesli"
                ),
                interest="Plus de protéines et calories de qualité",
                context="collation",
                keywords=("yaourt", "yaourt nature"),
            ),
            NutritionEquivalence(
                base_food="Poisson pané industriel",
                substitute="Poisson frais + panure maison",
                base_quantity="100 g poisson pané",
                substitute_quantity=(
                    "120 g poisson frais + panure flocons d'avoine, cuisson au four"
                ),
                interest="Plus de protéines, moins de graisses de mauvaise qualité",
                keywords=("poisson", "poisson pané", "poisson industriel"),
            ),
        ],
        Category.FECULENTS: [
            NutritionEquivalence(
                base_food="Salade verte seule",
                substitute='"Salade complète"',
                base_quantity="Salade = légumes uniquement",
                substitute_quantity=(
                    "Légumes + féculent (quinoa, pâtes complètes, riz) + protéines"
                ),
                interest="Vrai repas complet utile pour la prise de masse",
                context="repas",
                keywords=("salade", "salade verte", "salade seule"),
            ),
            NutritionEquivalence(
                base_food="Pain blanc",
                substitute="Pain complet ou aux graines",
                base_quantity="40 g baguette",
                substitute_quantity="40 g pain complet ou seigle",
                interest="Meilleure glycémie, plus de fibres",
                keywords=("pain", "pain blanc", "baguette"),
            ),
        ],
        Category.SNACKS: [
            NutritionEquivalence(
                base_food="Barre chocolatée",
                substitute="Collation maison",
                base_quantity="1 barre",
                substitute_quantity="1 banane + 20 g de noix + 1 yaourt",
                interest=(
                    "Plus de micronutriments, meilleure qualité énergétique"
                ),
                context="collation",
                keywords=("barre", "barre chocolatée", "barre sucrée"),
            ),
            NutritionEquivalence(
                base_food="Milk-shake industriel",
                substitute="Smoothie protéiné maison",
                base_quantity="Verre de milkshake",
                substitute_quantity=(
                    "Lait ou boisson soja + fruit + skyr ou poudre de lait"
                ),
                interest="Plus de protéines, moins de sucres ajoutés",
                context="collation",
                keywords=("milkshake", "milkshake industriel", "shake"),
            ),
        ],
    },
)

_REBALANCING = _goal(
    NutritionGoal.REBALANCING,
    title="Rééquilibrage alimentaire",
    icon="🔄",
    key_principles=[
        "Remettre structure et régularité dans les repas",
        "Varier les familles d'aliments",
        "Limiter les extrêmes (restriction ou excès)",
        'Prioriser le fait maison simple plutôt que "tout parfait"',
    ],
    equivalences={
        Category.GENERAL: [
            NutritionEquivalence(
                base_food='"Je saute le petit-déjeuner"',
                substitute='"Petit-déjeuner simple"',
                base_quantity="Rien le matin",
                substitute_quantity=(
                    "1 produit céréalier + 1 produit laitier + 1 fruit"
                ),
                interest="Limite les fringales et les grignotages",
                context="petit-déjeuner",
                keywords=("petit-déjeuner", "sauter repas", "sans petit-déjeuner"),
            ),
            NutritionEquivalence(
                base_food="Plat préparé",
                substitute="Assiette simple maison",
                base_quantity="1 plat préparé",
                substitute_quantity=(
                    "1 portion de féculents + 1 portion de légumes + 1 portion de "
                    "protéines (ex: pâtes + sauce tomate maison + thon + légumes)"
                ),
                interest="Moins de sel, moins de graisses cachées",
                context="repas",
                keywords=("plat préparé", "plat industriel", "plat tout prêt"),
            ),
            NutritionEquivalence(
                base_food="Sandwich charcuterie",
                substitute="Sandwich équilibré",
                base_quantity="Pain blanc + saucisson",
                substitute_quantity=(
                    "Pain complet + poulet ou thon + crudités + un peu de fromage "
                    "ou houmous"
                ),
                interest="Protéines de bonne qualité + légumes + fibres",
                context="repas",
                keywords=("sandwich", "sandwich charcuterie", "sandwich saucisson"),
            ),
        ],
        Category.SNACKS: [
            NutritionEquivalence(
                base_food="Paquet de biscuits",
                substitute="Portion de biscuits + fruit + boisson",
                base_quantity="4 biscuits",
                substitute_quantity="2 biscuits + 1 fruit + verre d'eau ou tisane",
                interest="Quantité maîtrisée, meilleure satiété",
                context="collation",
                keywords=("biscuits", "paquet biscuits", "grignotage"),
            ),
            NutritionEquivalence(
                base_food="Chips",
                substitute="Pois chiches rôtis ou fruits à coque",
                base_quantity="30 g chips",
                substitute_quantity="15-20 g noix ou amandes",
                interest="Graisses de meilleure qualité, plus rassasiant",
                context="apéro",
                keywords=("chips", "chips pommes de terre"),
            ),
        ],
    },
)

_DIABETES = _goal(
    NutritionGoal.DIABETES,
    title="Équilibrer son diabète",
    icon="🍬",
    key_principles=[
        "Répartition des glucides sur la journée",
        "Choisir des glucides à IG plus bas et riches en fibres",
        "Associer glucides + protéines + lipides de bonne qualité pour limiter les pics",
        'Attention aux boissons sucrées et sucres "cachés"',
    ],
    warning=(
        "Les conseils proposés sont généraux et ne remplacent pas un suivi "
        "personnalisé par un professionnel de santé."
    ),
    equivalences={
        Category.FECULENTS: [
            NutritionEquivalence(
                base_food="Pain blanc",
                substitute="Pain complet / seigle / aux céréales",
                base_quantity="40 g baguette",
                substitute_quantity="40 g pain complet",
                interest="IG plus bas, meilleure courbe glycémique",
                keywords=("pain", "pain blanc", "baguette"),
            ),
            NutritionEquivalence(
                base_food="Riz blanc cuisson rapide",
                substitute="Riz basmati complet ou quinoa",
                base_quantity="60 g riz cuisson rapide",
                substitute_quantity="60 g riz basmati complet ou quinoa",
                interest="Feutrage de la glycémie grâce aux fibres",
                keywords=("riz", "riz blanc", "riz cuisson rapide"),
            ),
            NutritionEquivalence(
                base_food="Purée de pomme de terre",
                substitute="Pomme de terre vapeur + filet d'huile",
                base_quantity="200 g purée",
                substitute_quantity=(
                    "200 g pommes de terre vapeur + 1 c. à café huile + légumes"
                ),
                interest="IG plus bas, plus de mastication",
                keywords=("purée", "purée pommes de terre"),
            ),
        ],
        Category.BOISSONS: [
            NutritionEquivalence(
                base_food="Jus de fruit",
                substitute="Fruit entier",
                base_quantity="200 ml jus",
                substitute_quantity="1 fruit + verre d'eau",
                interest="Fibres, glycémie plus lissée",
                keywords=("jus", "jus de fruit", "jus d'orange"),
            ),
        ],
        Category.DESSERTS: [
            NutritionEquivalence(
                base_food="Yaourt sucré",
                substitute="Yaourt nature + fruit frais",
                base_quantity="1 yaourt aux fruits",
                substitute_quantity="1 yaourt nature + ½ fruit frais + cannelle",
                interest="Moins de sucres ajoutés",
                keywords=("yaourt", "yaourt sucré", "yaourt aux fruits"),
            ),
            NutritionEquivalence(
                base_food="Dessert sucré chaque jour",
                substitute="Alternance dessert sucré / fruit / yaourt",
                base_quantity="7 jours de dessert sucré",
                substitute_quantity=(
                    "2-3 desserts sucrés + 2 fruits + 2 yaourts nature"
                ),
                interest="Charge glycémique globale réduite",
                keywords=("dessert", "dessert sucré", "dessert quotidien"),
            ),
        ],
        Category.GENERAL: [
            NutritionEquivalence(
                base_food="Plat de pâtes seules",
                substitute="Pâtes + légumes + protéines",
                base_quantity="Pâtes + beurre",
                substitute_quantity="Pâtes complètes + courgettes + poulet",
                interest=(
                    "Structure du repas : glucides complexes + protéines + légumes "
                    "+ graisses de qualité pour stabiliser la glycémie"
                ),
                context="repas",
                keywords=("pâtes", "pâtes seules", "repas"),
            ),
        ],
    },
)

_CHOLESTEROL = _goal(
    NutritionGoal.CHOLESTEROL,
    title="Baisser le cholestérol",
    icon="❤️",
    key_principles=[
        "Réduire les graisses saturées (charcuteries, fromages gras, beurre en excès)",
        "Augmenter les fibres solubles (avoine, légumineuses, fruits, légumes)",
        "Augmenter les AGPI et AGMI (huile colza, olive, noix, poissons gras)",
    ],
    equivalences={
        Category.MATIERES_GRASSES: [
            NutritionEquivalence(
                base_food="Beurre tartine",
                substitute="Purée d'oléagineux ou avocat",
                base_quantity="10 g beurre",
                substitute_quantity="10 g purée d'amande/noisette ou 20 g avocat",
                interest="Plus d'AGMI/AGPI, moins de saturés",
                context="petit-déjeuner",
                keywords=("beurre", "beurre tartine", "tartine"),
            ),
            NutritionEquivalence(
                base_food="Crème fraîche entière",
                substitute="Crème végétale ou yaourt",
                base_quantity="100 ml crème",
                substitute_quantity="100 ml crème soja cuisine ou 100 g yaourt grec",
                interest="Moins de graisses saturées",
                keywords=("crème", "crème fraîche", "crème entière"),
            ),
            NutritionEquivalence(
                base_food="Fromages gras",
                substitute="Fromages plus légers",
                base_quantity="40 g camembert ou raclette",
                substitute_quantity="30 g de fromage à 20-25% MG ou 30 g de feta",
                interest="Baisse de l'apport en saturés",
                keywords=("fromage", "fromage gras", "camembert", "raclette"),
            ),
        ],
        Category.PROTEINES: [
            NutritionEquivalence(
                base_food="Viandes rouges grasses",
                substitute="Volailles / poissons / légumineuses",
                base_quantity="150 g steak",
                substitute_quantity=(
                    "150 g blanc de poulet ou 150 g poisson ou 120 g lentilles cuites"
                ),
                interest="Profil lipidique plus favorable",
                keywords=("viande", "steak", "viande rouge", "bœuf"),
            ),
            NutritionEquivalence(
                base_food="Charcuterie",
                substitute="Jambon découenné / tofu / houmous",
                base_quantity="2 tranches de saucisson",
                substitute_quantity="2 tranches de jambon ou 40 g houmous + crudités",
                interest=(
                    "Moins de graisses saturées, plus de fibres (version végétale)"
                ),
                keywords=("charcuterie", "saucisson", "charcuterie grasse"),
            ),
        ],
        Category.FECULENTS: [
            NutritionEquivalence(
                base_food="Céréales raffinées",
                substitute="Avoine / orge / seigle",
                base_quantity="40 g céréales sucrées",
                substitute_quantity="40 g flocons d'avoine",
                interest="Fibres solubles, effet sur cholestérol LDL",
                context="petit-déjeuner",
                keywords=("céréales", "céréales sucrées", "céréales raffinées"),
            ),
            NutritionEquivalence(
                base_food="Absence de légumineuses",
                substitute="Légumineuses 2-3 fois/semaine",
                base_quantity="0 portion",
                substitute_quantity=(
                    "Intégrer lentilles, pois chiches, haricots dans salades, "
                    "plats chauds"
                ),
                interest="Effet sur cholestérol et satiété",
                keywords=("légumineuses", "lentilles", "pois chiches", "haricots"),
            ),
        ],
    },
)

_DIGESTION = _goal(
    NutritionGoal.DIGESTION,
    title="Améliorer la digestion et le confort intestinal",
    icon="🌿",
    key_principles=[
        "Augmenter progressivement les fibres (sans exploser tout d'un coup)",
        "Favoriser les fibres solubles (avoine, fruits, légumes cuits, "
        "légumineuses bien préparées)",
        "Bien répartir l'hydratation sur la journée",
        "Limiter les aliments très gras, très sucrés, ultra transformés qui "
        "irritent parfois le tube digestif",
    ],
    equivalences={
        Category.FECULENTS: [
            NutritionEquivalence(
                base_food="Pain blanc",
                substitute="Pain complet ou aux céréales",
                base_quantity="40 g pain blanc",
                substitute_quantity="40 g pain complet",
                interest="Plus de fibres, meilleure régularité du transit",
                keywords=("pain", "pain blanc", "baguette"),
            ),
            NutritionEquivalence(
                base_food="Céréales sucrées du matin",
                substitute="Flocons d'avoine",
                base_quantity="40 g céréales sucrées",
                substitute_quantity="40 g flocons d'avoine",
                interest=(
                    "Fibres solubles (bêta-glucanes), bon pour transit et satiété"
                ),
                context="petit-déjeuner",
                keywords=("céréales", "céréales sucrées", "céréales petit déjeuner"),
            ),
        ],
        Category.GENERAL: [
            NutritionEquivalence(
                base_food="Légumes crus difficiles à digérer",
                substitute="Légumes cuits",
                base_quantity="Grande salade crue le soir",
                substitute_quantity=(
                    "Légumes cuits vapeur ou mijotés (ex: carottes, courgettes, "
                    "fenouil, poireaux cuits)"
                ),
                interest="Moins irritant, plus digeste, toujours riche en fibres",
                context="repas",
                keywords=("légumes", "légumes crus", "crudités", "salade crue"),
            ),
            NutritionEquivalence(
                base_food='Légumineuses "qui ballonnent"',
                substitute="Légumineuses mieux préparées",
                base_quantity='100 g lentilles cuites "classiques"',
                substitute_quantity=(
                    "100 g lentilles cuites après trempage et rinçage"
                ),
                interest="Moins de fermentation, meilleure tolérance",
                keywords=("lentilles", "légumineuses", "ballonnements"),
            ),
            NutritionEquivalence(
                base_food="Pois chiches entiers",
                substitute="Houmous ou purée de pois chiches",
                base_quantity="100 g pois chiches entiers",
                substitute_quantity="40-50 g houmous",
                interest="Texture plus douce, souvent mieux tolérée",
                keywords=("pois chiches", "légumineuses"),
            ),
        ],
        Category.DESSERTS: [
            NutritionEquivalence(
                base_food="Crème dessert grasse",
                substitute="Yaourt nature + compote",
                base_quantity="1 crème dessert",
                substitute_quantity="1 yaourt nature + 2-3 c. à soupe de compote",
                interest=(
                    "Moins gras, plus de fibres, plus digeste "
                    "(pour beaucoup de gens)"
                ),
                keywords=("crème dessert", "dessert gras", "dessert lourd"),
            ),
        ],
    },
)

_VEGETARIAN = _goal(
    NutritionGoal.VEGETARIAN,
    title="Alimentation végétarienne équilibrée",
    icon="🌱",
    key_principles=[
        "Assurer des apports protéiques suffisants",
        "Varier les sources (légumineuses, soja, œufs, produits laitiers, oléagineux)",
        "Penser au duo féculent + légumineuse pour les acides aminés",
    ],
    equivalences={
        Category.PROTEINES: [
            NutritionEquivalence(
                base_food="Poulet / viande",
                substitute="Légumineuses + céréales",
                base_quantity="100 g blanc de poulet",
                substitute_quantity=(
                    "150 g de mélange lentilles + riz "
                    "(par ex 80 g lentilles cuites + 70 g riz cuit)"
                ),
                interest="Protéines + glucides complexes + fibres",
                keywords=("poulet", "viande", "blanc de poulet", "protéine animale"),
            ),
            NutritionEquivalence(
                base_food="Haché bœuf",
                substitute="Soja texturé ou tofu",
                base_quantity="100 g bœuf haché",
                substitute_quantity=(
                    "40 g protéines de soja texturées sèches (PST) réhydratées"
                ),
                interest="Riche en protéines, très peu de graisses",
                keywords=("bœuf", "bœuf haché", "viande hachée", "steak haché"),
            ),
            NutritionEquivalence(
                base_food="Haché bœuf",
                substitute="Tofu ferme émietté mariné",
                base_quantity="100 g bœuf haché",
                substitute_quantity="120 g de tofu ferme émietté mariné",
                interest="Protéines, AGPI, profil lipidique plus intéressant",
                keywords=("bœuf", "bœuf haché", "viande hachée", "steak haché"),
            ),
            NutritionEquivalence(
                base_food="Charcuterie",
                substitute="Alternatives végétariennes",
                base_quantity="2 tranches de saucisson",
                substitute_quantity="Tartine houmous + crudités",
                interest="Moins de graisses saturées et sel, plus de fibres",
                keywords=("charcuterie", "saucisson", "charcuterie grasse"),
            ),
            NutritionEquivalence(
                base_food="Bacon dans une salade",
                substitute="Tofu fumé en dés ou tempeh mariné",
                base_quantity="30 g bacon",
                substitute_quantity="40 g tofu fumé",
                interest="Goût fumé + protéines végétales",
                context="repas",
                keywords=("bacon", "lardons", "charcuterie"),
            ),
        ],
    },
)

_ENERGY = _goal(
    NutritionGoal.ENERGY,
    title="Énergie et fatigue (vitalité au quotidien)",
    icon="⚡",
    key_principles=[
        "Stabiliser la glycémie (éviter gros pics puis gros creux)",
        "Apporter des glucides complexes + protéines régulièrement",
        "Ne pas négliger le petit-déjeuner ni les collations stratégiques",
    ],
    equivalences={
        Category.GENERAL: [
            NutritionEquivalence(
                base_food="Petit-déjeuner sucré mais pauvre en protéines",
                substitute="Petit-déjeuner plus complet",
                base_quantity="Bol de céréales sucrées + jus",
                substitute_quantity=(
                    "Flocons d'avoine + lait ou boisson soja + fruit "
                    "(40 g flocons + 200 ml lait + 1 fruit)"
                ),
                interest="Plus de protéines, fibres, énergie plus stable",
                context="petit-déjeuner",
                keywords=(
                    "petit-déjeuner",
                    "céréales",
                    "céréales sucrées",
                    "petit déjeuner",
                ),
            ),
            NutritionEquivalence(
                base_food="Repas très légers",
                substitute="Repas complets",
                base_quantity="Salade uniquement légumes",
                substitute_quantity=(
                    "Salade complète : salade + féculent (quinoa, pâtes complètes) "
                    "+ protéines (œufs, pois chiches, thon, tofu...)"
                ),
                interest="Évite le coup de pompe et le grignotage 2h après",
                context="repas",
                keywords=("salade", "salade verte", "repas léger", "repas insuffisant"),
            ),
        ],
        Category.SNACKS: [
            NutritionEquivalence(
                base_food="Grignotage sucré",
                substitute="Collation équilibrée",
                base_quantity="Barre chocolatée",
                substitute_quantity=(
                    "Fruit + oléagineux (1 banane + 10-15 g d'amandes ou noix)"
                ),
                interest="Énergie mieux étalée, moins d'appel au sucre derrière",
                context="collation",
                keywords=("barre", "barre chocolatée", "grignotage", "collation sucrée"),
            ),
            NutritionEquivalence(
                base_food="Biscuit sec seul",
                substitute="Yaourt + fruit",
                base_quantity="2 biscuits seuls",
                substitute_quantity="1 biscuit + 1 yaourt + 1 fruit",
                interest="Protéines + fibres → moins de coups de fatigue",
                context="collation",
                keywords=("biscuit", "biscuits", "collation"),
            ),
        ],
    },
)

_HYPERTENSION = _goal(
    NutritionGoal.HYPERTENSION,
    title="Hypertension (baisser la tension)",
    icon="🧂",
    key_principles=[
        "Réduire le sel ajouté et caché",
        "Choisir des aliments naturellement riches en potassium (fruits, légumes)",
        "Limiter charcuteries, plats préparés, fromages très salés",
    ],
    warning="Ces conseils ne remplacent pas un suivi médical ni un traitement.",
    equivalences={
        Category.GENERAL: [
            NutritionEquivalence(
                base_food="Bouillon cube salé",
                substitute="Bouillon réduit en sel + herbes",
                base_quantity="1 cube standard",
                substitute_quantity=(
                    '1 cube "réduit en sel" + herbes (laurier, thym) + ail/oignon'
                ),
                interest="Moins de sodium pour le même goût perçu",
                keywords=("bouillon", "bouillon cube", "cube", "sel"),
            ),
            NutritionEquivalence(
                base_food="Sel de table",
                substitute="Mélange d'aromates",
                base_quantity="1 pincée de sel",
                substitute_quantity=(
                    "Mélange herbes + épices + jus de citron ou vinaigre"
                ),
                interest="Diminution progressive du sel sans perte de plaisir",
                keywords=("sel", "sel de table", "sale"),
            ),
        ],
        Category.PROTEINES: [
            NutritionEquivalence(
                base_food="Charcuterie au quotidien",
                substitute="Alternatives moins salées",
                base_quantity="2 tranches de saucisson ou chorizo",
                substitute_quantity="2 tranches de jambon blanc découenné dégraissé",
                interest="Moins de sel, moins de graisses saturées",
                keywords=("charcuterie", "saucisson", "chorizo", "charcuterie grasse"),
            ),
            NutritionEquivalence(
                base_food="Charcuterie",
                substitute="Poulet froid ou poisson en conserve sans sel ajouté",
                base_quantity="1 portion de charcuterie",
                substitute_quantity=(
                    "1 portion de poulet froid ou de poisson en conserve sans sel "
                    "ajouté (ex: rillettes → thon nature + fromage frais + citron)"
                ),
                interest="Moins de sel, alternatives plus saines",
                keywords=("charcuterie", "rillettes", "charcuterie grasse"),
            ),
        ],
        Category.MATIERES_GRASSES: [
            NutritionEquivalence(
                base_food="Fromages très salés",
                substitute="Fromages plus doux",
                base_quantity="30 g feta",
                substitute_quantity="30 g ricotta, mozzarella ou fromage frais",
                interest="Souvent moins salés (ou possibilité de rincer la feta)",
                keywords=("fromage", "feta", "fromage salé"),
            ),
        ],
    },
)

_SLEEP_STRESS = _goal(
    NutritionGoal.SLEEP_STRESS,
    title="Mieux dormir et gérer le stress",
    icon="😴",
    key_principles=[
        "Éviter les gros repas gras tardifs",
        "Limiter café, boissons énergisantes, thé fort en fin de journée",
        "Favoriser un dîner modéré, avec féculents + légumes + protéines",
    ],
    equivalences={
        Category.GENERAL: [
            NutritionEquivalence(
                base_food="Repas lourd le soir",
                substitute="Repas plus léger mais complet",
                base_quantity="Pizza ou fast-food tardif",
                substitute_quantity=(
                    "Plat simple (exemple: pâtes complètes + légumes + œufs "
                    "ou poisson)"
                ),
                interest="Digestion plus facile, meilleur sommeil",
                context="dîner",
                keywords=(
                    "repas",
                    "repas lourd",
                    "pizza",
                    "fast-food",
                    "soir",
                    "dîner",
                ),
            ),
        ],
        Category.BOISSONS: [
            NutritionEquivalence(
                base_food="Café après 16-17h",
                substitute="Boisson chaude sans caféine",
                base_quantity="Café fort",
                substitute_quantity="Tisane, rooibos, infusion",
                interest="Moins de stimulation, meilleure qualité de sommeil",
                context="après-midi",
                keywords=("café", "café fort", "caféine", "boisson énergisante"),
            ),
        ],
        Category.SNACKS: [
            NutritionEquivalence(
                base_food="Grignotage sucré tardif",
                substitute="Collation légère si besoin",
                base_quantity="Biscuits, chocolat en grande quantité",
                substitute_quantity=(
                    "Yaourt nature + 1 fruit ou petite poignée d'oléagineux"
                ),
                interest="Limite les variations de glycémie nocturnes",
                context="soir",
                keywords=("grignotage", "biscuits", "chocolat", "soir", "tardif"),
            ),
        ],
    },
)

NUTRITION_GOALS: Mapping[NutritionGoal, NutritionGoalData] = MappingProxyType(
    {
        goal_data.id: goal_data
        for goal_data in (
            _WEIGHT_LOSS,
            _MUSCLE_GAIN,
            _REBALANCING,
            _DIABETES,
            _CHOLESTEROL,
            _DIGESTION,
            _VEGETARIAN,
            _ENERGY,
            _HYPERTENSION,
            _SLEEP_STRESS,
        )
    }
)
