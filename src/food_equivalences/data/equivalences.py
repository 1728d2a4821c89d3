"""Ingredient equivalence catalog.

Recipe topics come first, then everyday nutrition topics. Order is display
order and is preserved by every search.
"""

from food_equivalences.domain.equivalences import (
    Alternative,
    Equivalence,
    EquivalenceType,
)

_RECIPE = EquivalenceType.RECIPE
_NUTRITION = EquivalenceType.NUTRITION

_RECIPE_EQUIVALENCES: tuple[Equivalence, ...] = (
    # Matières grasses
    Equivalence(
        ingredient="beurre",
        category="Matières grasses - Pâtisserie",
        type=_RECIPE,
        keywords=("beurre", "beurres"),
        alternatives=(
            Alternative(
                name="Huile végétale neutre",
                equivalence=(
                    "100 g de beurre ≈ 80 g d'huile "
                    "(colza, tournesol, pépin de raisin)"
                ),
                interest=(
                    "Moins de graisses saturées, plus d'acides gras insaturés "
                    "(AGPI et AGMI)"
                ),
                remarks=(
                    "Texture un peu plus fondante. Ne pas dépasser 100 à 120 ml "
                    "d'huile pour un gâteau classique"
                ),
            ),
            Alternative(
                name="Mélange huile + compote de fruit",
                equivalence=(
                    "100 g de beurre → 40 g d'huile + 60 g de compote "
                    "sans sucres ajoutés"
                ),
                interest=(
                    "Moins de graisses totales, plus de fibres si compote avec "
                    "morceaux, moins de calories pour la même sensation de moelleux"
                ),
                ideal_for="Cakes, muffins, gâteaux moelleux",
            ),
            Alternative(
                name="Yaourt ou fromage blanc",
                equivalence=(
                    "100 g de beurre → 80 à 100 g de yaourt nature ou fromage "
                    "blanc à 3-4% de MG"
                ),
                interest=(
                    "Réduction importante des graisses saturées, apport de "
                    "protéines et de calcium"
                ),
                limits=(
                    "À éviter dans les pâtes sablées et feuilletées. Gâteaux plus "
                    "moelleux mais moins fondants"
                ),
            ),
            Alternative(
                name="Purée d'oléagineux (amande, noisette, cacahuète)",
                equivalence=(
                    "100 g de beurre → 80 à 100 g de purée d'amande ou de noisette"
                ),
                interest="Plus d'acides gras insaturés, plus de fibres et de minéraux",
                remarks=(
                    "Apporte un goût plus marqué. Intéressant pour biscuits, "
                    "cookies, cakes"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="beurre",
        category="Matières grasses - Tartines",
        type=_RECIPE,
        keywords=("beurre", "beurres", "tartine"),
        alternatives=(
            Alternative(
                name="Purée d'oléagineux",
                equivalence=(
                    "10 g de beurre → 10 g de purée d'amande, noisette ou cacahuète"
                ),
                interest='Plus de "bons gras" et de protéines',
            ),
            Alternative(
                name="Avocat écrasé",
                equivalence="10 g de beurre → 20 g d'avocat",
                interest="Plus de fibres et d'AGMI",
            ),
            Alternative(
                name="Fromage frais (ricotta ou carré frais)",
                equivalence="10 g de beurre → 15 g de fromage frais",
                interest="Plus de protéines, moins de graisses saturées",
            ),
        ),
    ),
    # Œufs
    Equivalence(
        ingredient="œuf",
        category="Pâtisserie",
        type=_RECIPE,
        keywords=("œuf", "oeuf", "œufs", "oeufs"),
        alternatives=(
            Alternative(
                name="Compote de pomme",
                equivalence="1 œuf → 50 g de compote sans sucres ajoutés",
                interest="Moelleux, moins de graisses",
                limits=(
                    "À éviter dans les recettes où l'œuf donne du volume "
                    "(génoises légères)"
                ),
            ),
            Alternative(
                name="Banane écrasée",
                equivalence="1 œuf → 50 à 60 g de banane bien mûre écrasée",
                interest="Sucre naturel, potassium, fibres",
                remarks="Goût banane prononcé",
            ),
            Alternative(
                name="Graines de chia ou de lin (œuf de chia/lin)",
                equivalence=(
                    "1 œuf → 1 c. à soupe rase de graines de chia ou lin moulues "
                    "+ 3 c. à soupe d'eau (laisser gonfler 10 minutes)"
                ),
                interest="Plus de fibres, AGPI oméga 3",
                ideal_for="Muffins, gâteaux denses, pains maison",
            ),
            Alternative(
                name="Yaourt ou boisson végétale",
                equivalence=(
                    "1 œuf → 40 g de yaourt ou 40 ml de boisson végétale "
                    "+ 1 c. à café d'huile"
                ),
                interest="Texture moelleuse, moins riche en cholestérol",
                ideal_for="Cakes rapides",
            ),
            Alternative(
                name="Tofu soyeux (vegan, riche en protéines)",
                equivalence="1 œuf → 40 à 50 g de tofu soyeux mixé",
                interest="Riche en protéines, texture fondante",
                ideal_for="Flans, cheesecakes légers, crèmes dessert",
            ),
        ),
    ),
    # Sucre
    Equivalence(
        ingredient="sucre",
        category="Édulcorants",
        type=_RECIPE,
        keywords=("sucre", "sucres", "sucre blanc"),
        alternatives=(
            Alternative(
                name="Réduction directe",
                equivalence=(
                    "100 g de sucre dans une recette standard → essayer 70 à 80 g"
                ),
                interest=(
                    "Moins de sucres ajoutés, goût déjà suffisant dans la "
                    "majorité des gâteaux"
                ),
                remarks="Ajouter des épices ou zestes pour compenser la baisse de sucre",
            ),
            Alternative(
                name="Sucre complet ou non raffiné",
                equivalence=(
                    "100 g sucre blanc → 80 à 100 g de sucre complet, muscovado, "
                    "rapadura, sucre de coco"
                ),
                interest="Légèrement plus de minéraux, arômes plus riches",
                remarks="Impact glycémique global similaire",
            ),
            Alternative(
                name="Miel ou sirop d'érable",
                equivalence=(
                    "100 g de sucre → 70 à 75 g de miel ou sirop d'érable "
                    "(diminuer légèrement le liquide de 10 à 15 ml)"
                ),
                interest="Goût plus intense, possibilité de mettre un peu moins",
                remarks="Reste une source de sucres rapides",
            ),
            Alternative(
                name="Purée de dattes ou de fruits secs",
                equivalence=(
                    "100 g de sucre → 80 à 100 g de dattes dénoyautées mixées "
                    "avec un peu d'eau"
                ),
                interest="Fibres, minéraux",
                ideal_for="Barres, bouchées énergétiques, pâte à tartiner",
            ),
            Alternative(
                name="Mélange sucre + compote ou banane",
                equivalence=(
                    "100 g de sucre → 40 g de sucre + 60 g de compote "
                    "ou banane écrasée"
                ),
                interest=(
                    "Réduction nette des sucres ajoutés, plus de fibres et de volume"
                ),
            ),
        ),
    ),
    # Farine blanche
    Equivalence(
        ingredient="farine",
        category="Farines",
        type=_RECIPE,
        keywords=("farine", "farines", "farine blanche", "farine de blé"),
        alternatives=(
            Alternative(
                name="Farine semi-complète",
                equivalence="100 g de farine blanche → 100 g de farine T80",
                interest="Plus de fibres, meilleure satiété",
                remarks="Généralement pas besoin d'adapter la recette",
            ),
            Alternative(
                name="Farine complète",
                equivalence=(
                    "100 g → 90 à 100 g de farine T110 à T150 "
                    "(parfois ajouter 1 à 2 c. à soupe de liquide)"
                ),
                interest="Fibres multipliées, micronutriments plus élevés",
                remarks="Texture plus dense",
            ),
            Alternative(
                name="Farine d'avoine",
                equivalence="100 g de farine → 100 à 110 g de flocons d'avoine mixés",
                interest="Fibres solubles, effet sur la satiété",
                ideal_for="Pancakes, cookies, muffins",
            ),
            Alternative(
                name="Remplacement partiel par poudre d'oléagineux",
                equivalence=(
                    "100 g de farine → 70 g de farine + 30 g de poudre "
                    "d'amande ou noisette"
                ),
                interest=(
                    "Plus de bonnes graisses, index glycémique un peu plus bas"
                ),
                remarks="Texture plus fondante",
            ),
        ),
    ),
    # Lait et crème
    Equivalence(
        ingredient="lait",
        category="Produits laitiers",
        type=_RECIPE,
        keywords=("lait", "lait entier"),
        alternatives=(
            Alternative(
                name="Lait demi-écrémé",
                equivalence="100 ml → 100 ml",
                interest="Moins de graisses saturées",
            ),
            Alternative(
                name="Boisson végétale",
                equivalence="100 ml → 100 ml de boisson soja, avoine ou amande",
                interest=(
                    "Pour intolérants ou choix éthique. Boisson soja enrichie "
                    "en calcium = bonne alternative"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="crème",
        category="Produits laitiers",
        type=_RECIPE,
        keywords=("crème", "crème fraîche", "crème entière"),
        alternatives=(
            Alternative(
                name="Crème légère",
                equivalence="100 ml de crème entière → 100 ml de crème à 15% de MG",
            ),
            Alternative(
                name="Yaourt grec ou fromage blanc",
                equivalence=(
                    "100 ml de crème → 100 g de yaourt grec 5% ou fromage blanc"
                ),
                interest="Moins de graisses saturées, plus de protéines",
                remarks="À ajouter plutôt en fin de cuisson pour sauces et quiches",
            ),
            Alternative(
                name="Crème végétale",
                equivalence="100 ml de crème → 100 ml de crème soja ou avoine cuisine",
                interest="Moins riche en graisses saturées selon la crème choisie",
            ),
        ),
    ),
    # Viandes et protéines
    Equivalence(
        ingredient="viande hachée",
        category="Protéines",
        type=_RECIPE,
        keywords=("viande", "viande hachée", "bœuf", "steak haché"),
        alternatives=(
            Alternative(
                name="Lentilles cuites",
                equivalence="100 g de viande → 120 à 150 g de lentilles cuites",
                interest="Fibres, protéines végétales",
                ideal_for="Bolognaise, chili, hachis parmentier",
            ),
            Alternative(
                name="Tofu ferme émietté",
                equivalence="100 g de viande → 100 g de tofu ferme émietté mariné",
                interest="Protéines végétales riches en AGPI",
                remarks="À bien assaisonner",
            ),
            Alternative(
                name="PST (protéine de soja texturée)",
                equivalence=(
                    "100 g de viande → 40 g de PST sèches réhydratées dans bouillon"
                ),
                interest="Beaucoup de protéines, peu de graisses",
            ),
        ),
    ),
    Equivalence(
        ingredient="panure",
        category="Panures",
        type=_RECIPE,
        keywords=("panure", "chapelure", "pané"),
        alternatives=(
            Alternative(
                name="Flocons d'avoine ou polenta",
                equivalence="Même quantité qu'une chapelure",
                interest="Plus de fibres que panure blanche",
            ),
        ),
    ),
    Equivalence(
        ingredient="steak haché",
        category="Protéines",
        type=_RECIPE,
        keywords=("steak", "steak haché", "burger", "nugget"),
        alternatives=(
            Alternative(
                name="Galette de pois chiches (falafel burger)",
                equivalence=(
                    "100 g de steak haché → 100 g de galette de pois chiches "
                    "cuits mixés"
                ),
            ),
        ),
    ),
    # Sel et bouillon
    Equivalence(
        ingredient="sel",
        category="Assaisonnements",
        type=_RECIPE,
        keywords=("sel", "sale"),
        alternatives=(
            Alternative(
                name="Herbes, épices et agrumes",
                equivalence=(
                    "Remplacer une partie du sel par herbes aromatiques, ail, "
                    "oignon, citron, zeste, vinaigre"
                ),
                interest="Réduction sodium",
            ),
        ),
    ),
    Equivalence(
        ingredient="bouillon cube",
        category="Assaisonnements",
        type=_RECIPE,
        keywords=("bouillon", "bouillon cube", "cube"),
        alternatives=(
            Alternative(
                name="Bouillon maison ou cube réduit en sel",
                equivalence='1 cube standard → 1 cube "réduit en sel" + herbes + épices',
            ),
        ),
    ),
    # Liants et épaississants
    Equivalence(
        ingredient="roux",
        category="Liants",
        type=_RECIPE,
        keywords=("roux", "beurre farine"),
        alternatives=(
            Alternative(
                name="Fécule ou maïzena",
                equivalence=(
                    "20 g de beurre + 20 g de farine pour 250 ml de lait → "
                    "10 g de fécule pour 250 ml de liquide"
                ),
                interest="Moins de matières grasses",
            ),
        ),
    ),
    Equivalence(
        ingredient="crème épaississante",
        category="Liants",
        type=_RECIPE,
        keywords=("crème", "épaissir"),
        alternatives=(
            Alternative(
                name="Yaourt grec ou fromage blanc",
                equivalence=(
                    "2 c. à soupe de crème → 2 c. à soupe de yaourt grec ajouté "
                    "en fin de cuisson"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="crème fraîche épaisse",
        category="Produits laitiers",
        type=_RECIPE,
        keywords=("crème fraîche épaisse", "crème fraîche entière", "crème épaisse"),
        alternatives=(
            Alternative(
                name="Skyr nature",
                equivalence=(
                    "100 g de crème fraîche entière → 80 à 100 g de skyr nature"
                ),
                interest=(
                    "Beaucoup plus riche en protéines, beaucoup moins de "
                    "graisses saturées"
                ),
                ideal_for=(
                    'Sauces froides, dips, garnitures de wraps, quiches "plus légères"'
                ),
            ),
            Alternative(
                name="Fromage frais type ricotta",
                equivalence="100 g de crème → 100 g de ricotta",
                interest="Moins grasse, plus riche en protéines et calcium",
                ideal_for="Gratins, lasagnes, farces de légumes",
            ),
            Alternative(
                name="Lait concentré non sucré",
                equivalence=(
                    "100 ml de crème → 80 à 100 ml de lait concentré non sucré "
                    "+ 1 c. à café d'huile neutre"
                ),
                interest="Apporte du crémeux avec moins de graisses",
                ideal_for="Sauces chaudes, gratins, quiches",
            ),
            Alternative(
                name="Crème de soja ou avoine cuisine enrichie en calcium",
                equivalence="100 ml de crème → 100 ml de crème végétale",
                interest=(
                    "Souvent moins de graisses saturées, compatible alimentation "
                    "végétarienne ou intolérance au lactose"
                ),
            ),
        ),
    ),
    # Graisse de cuisson
    Equivalence(
        ingredient="beurre de cuisson",
        category="Matières grasses - Cuisson",
        type=_RECIPE,
        keywords=("beurre de cuisson", "beurre cuisson", "cuisson beurre"),
        alternatives=(
            Alternative(
                name="Huile d'olive",
                equivalence="10 g de beurre → 7 à 8 g d'huile d'olive",
                interest="Plus d'acides gras mono-insaturés",
                ideal_for="Poêlées, légumes, viandes blanches",
            ),
        ),
    ),
    Equivalence(
        ingredient="cuisson frite",
        category="Méthodes de cuisson",
        type=_RECIPE,
        keywords=("frit", "frite", "friture", "nuggets frits"),
        alternatives=(
            Alternative(
                name="Cuisson au four avec un peu d'huile",
                equivalence=(
                    "Nuggets maison frits → nuggets au four avec 1 à 2 c. à soupe "
                    "d'huile pour toute la plaque"
                ),
                interest="Beaucoup moins de graisses totales",
                ideal_for=(
                    "Pommes de terre rôties, légumes rôtis, falafels, galettes"
                ),
            ),
        ),
    ),
    # Œuf liant
    Equivalence(
        ingredient="œuf liant",
        category="Liants - Œufs",
        type=_RECIPE,
        keywords=("œuf liant", "oeuf liant", "œuf pour lier", "oeuf pour lier"),
        alternatives=(
            Alternative(
                name="Fécule + eau",
                equivalence=(
                    "1 œuf → 1 c. à soupe bombée de fécule de maïs ou de pomme "
                    "de terre + 2 c. à soupe d'eau"
                ),
                interest=(
                    "Épaissit et lie sans ajouter de graisses ni cholestérol"
                ),
                ideal_for="Gâteaux, crêpes, galettes",
            ),
            Alternative(
                name="Aquafaba (pour blanc d'œuf en neige)",
                equivalence=(
                    "1 blanc d'œuf → 30 ml d'aquafaba (jus de cuisson ou jus de "
                    "conserve de pois chiches) monté en neige"
                ),
                interest="100% végétal, très peu calorique",
                ideal_for='Mousses "végétales", meringues véganes',
            ),
            Alternative(
                name="Mélange lait + fécule (pour quiche)",
                equivalence=(
                    "1 œuf → 40 ml de lait ou boisson végétale "
                    "+ 1 c. à café de fécule"
                ),
                interest="Diminue les lipides et le cholestérol",
                remarks=(
                    "À compléter avec fromage frais ou skyr pour garder une "
                    "bonne tenue"
                ),
            ),
            Alternative(
                name=(
                    "Pomme de terre ou patate douce écrasée "
                    "(pour boulettes/galettes)"
                ),
                equivalence=(
                    "1 œuf → 40 à 50 g de purée de pomme de terre ou patate douce"
                ),
                interest="Donne du liant, ajoute un féculent rassasiant",
                ideal_for="Boulettes de légumes, galettes de légumineuses",
            ),
        ),
    ),
    # Produits sucrés
    Equivalence(
        ingredient="yaourt aromatisé",
        category="Produits sucrés",
        type=_RECIPE,
        keywords=("yaourt aromatisé", "yaourt sucré", "yaourt parfumé"),
        alternatives=(
            Alternative(
                name="Yaourt nature + toppings",
                equivalence=(
                    "1 yaourt aromatisé (sucré) → 1 yaourt nature + 1 c. à café "
                    "de miel ou sirop + 1 petite poignée de fruits frais"
                ),
                interest=(
                    "Moins de sucres ajoutés, plus de fibres et de "
                    "micronutriments via les fruits"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="crème dessert",
        category="Desserts",
        type=_RECIPE,
        keywords=("crème dessert", "crème dessert industrielle", "dessert chocolat"),
        alternatives=(
            Alternative(
                name="Fromage blanc ou skyr + cacao",
                equivalence=(
                    "1 crème dessert chocolat → 150 g de fromage blanc ou skyr "
                    "+ 1 c. à café de cacao non sucré + 1 c. à café de sucre ou miel"
                ),
                interest=(
                    "Plus de protéines, moins de graisses, moins de sucres selon "
                    "la dose ajoutée"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="sucre épices",
        category="Édulcorants",
        type=_RECIPE,
        keywords=("sucre", "réduire sucre", "moins sucre"),
        alternatives=(
            Alternative(
                name="Épices et arômes",
                equivalence=(
                    "Diminuer le sucre de 20 à 30% et ajouter vanille, cannelle, "
                    "fève tonka en petite quantité, zestes d'agrumes"
                ),
                interest="Réduction des sucres ajoutés sans perte de plaisir",
            ),
        ),
    ),
    Equivalence(
        ingredient="confiture",
        category="Produits sucrés",
        type=_RECIPE,
        keywords=("confiture", "confiture classique"),
        alternatives=(
            Alternative(
                name="Compote avec morceaux + un peu de miel",
                equivalence=(
                    "1 c. à soupe de confiture → 2 c. à soupe de compote "
                    "+ 1 c. à café de miel"
                ),
                interest="Plus de fruits, moins de sucre concentré",
            ),
        ),
    ),
    Equivalence(
        ingredient="bonbons",
        category="Snacks sucrés",
        type=_RECIPE,
        keywords=("bonbons", "bonbon", "sucreries"),
        alternatives=(
            Alternative(
                name="Fruits secs en petite quantité",
                equivalence=(
                    "30 g de bonbons → 15 g de fruits secs (raisins secs, "
                    "abricots, dattes) + 1 ou 2 noix ou amandes"
                ),
                interest="Fibres, micronutriments",
                remarks="Reste sucré mais plus rassasiant",
            ),
        ),
    ),
    # Farines complémentaires
    Equivalence(
        ingredient="farine pois chiches",
        category="Farines - Légumineuses",
        type=_RECIPE,
        keywords=("farine pois chiches", "farine de pois chiches"),
        alternatives=(
            Alternative(
                name="Remplacement partiel",
                equivalence=(
                    "100 g de farine blanche → 60 à 70 g de farine blanche "
                    "+ 30 à 40 g de farine de pois chiches"
                ),
                interest="Plus de protéines, plus de fibres",
                ideal_for="Crêpes salées, galettes, pâtes à tarte salées",
            ),
        ),
    ),
    Equivalence(
        ingredient="farine sarrasin",
        category="Farines - Sans gluten",
        type=_RECIPE,
        keywords=("farine sarrasin", "farine de sarrasin", "sarrasin"),
        alternatives=(
            Alternative(
                name="Remplacement partiel ou total",
                equivalence=(
                    "100 g de farine de blé → 50 à 70 g de farine de sarrasin "
                    "+ 30 à 50 g de farine de blé"
                ),
                interest=(
                    "Sans gluten si 100% sarrasin, apport intéressant en fibres"
                ),
                ideal_for="Crêpes, pâtes à tarte rustiques",
            ),
        ),
    ),
    Equivalence(
        ingredient="farine riz",
        category="Farines - Sans gluten",
        type=_RECIPE,
        keywords=("farine riz", "farine de riz"),
        alternatives=(
            Alternative(
                name="Farine de riz + fécule",
                equivalence=(
                    "100 g de farine de blé → 80 g de farine de riz + 20 g de fécule"
                ),
                interest="Option sans gluten",
                remarks=(
                    "Texture plus friable, à réserver plutôt aux gâteaux moelleux"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="farine coco",
        category="Farines - Alternatives",
        type=_RECIPE,
        keywords=("farine coco", "farine de coco"),
        alternatives=(
            Alternative(
                name="Remplacement partiel seulement",
                equivalence=(
                    "Sur 100 g de farine → 80 g de farine de blé "
                    "+ 20 g de farine de coco"
                ),
                interest="Très riche en fibres",
                remarks=(
                    "Absorbe beaucoup de liquide → souvent ajouter un peu de lait "
                    "ou œuf en plus"
                ),
            ),
        ),
    ),
    # Fromages et garnitures
    Equivalence(
        ingredient="cream cheese",
        category="Fromages",
        type=_RECIPE,
        keywords=("cream cheese", "philadelphia", "fromage à tartiner"),
        alternatives=(
            Alternative(
                name="Skyr ou fromage frais battu",
                equivalence=(
                    "100 g de cream cheese → 80 à 100 g de skyr battu avec 10 g "
                    "de purée d'amande ou un peu d'huile neutre"
                ),
                interest="Moins de graisses saturées, plus de protéines",
                ideal_for='Cheesecakes "allégés", tartinades',
            ),
        ),
    ),
    Equivalence(
        ingredient="fromage râpé",
        category="Fromages",
        type=_RECIPE,
        keywords=("fromage râpé", "fromage gratin", "gratin fromage"),
        alternatives=(
            Alternative(
                name="Mélange fromage + chapelure",
                equivalence=(
                    "50 g de fromage râpé → 25 g de fromage râpé + 10 à 15 g "
                    "de chapelure ou flocons d'avoine"
                ),
                interest="Moins de graisses saturées, visuel gratiné préservé",
            ),
        ),
    ),
    Equivalence(
        ingredient="charcuterie apéro",
        category="Charcuteries",
        type=_RECIPE,
        keywords=("charcuterie", "rillettes", "saucisson", "apéro"),
        alternatives=(
            Alternative(
                name="Tartinades à base de légumineuses",
                equivalence=(
                    "30 g de rillettes → 40 à 50 g d'houmous, caviar de lentilles, "
                    "purée de pois cassés"
                ),
                interest=(
                    "Moins de graisses saturées, plus de fibres et protéines végétales"
                ),
            ),
        ),
    ),
    # Viandes, charcuteries et produits animaux
    Equivalence(
        ingredient="charcuterie grasse",
        category="Charcuteries",
        type=_RECIPE,
        keywords=("charcuterie grasse", "saucisson", "charcuterie"),
        alternatives=(
            Alternative(
                name="Jambon découenné dégraissé",
                equivalence="40 g de saucisson → 40 g de jambon blanc découenné",
                interest="Beaucoup moins de graisses saturées et de calories",
                remarks="Vigilance toujours sur le sel",
            ),
        ),
    ),
    Equivalence(
        ingredient="lardons",
        category="Charcuteries",
        type=_RECIPE,
        keywords=("lardons", "lardon", "bacon"),
        alternatives=(
            Alternative(
                name="Allumettes de jambon ou tofu fumé",
                equivalence=(
                    "50 g de lardons → 50 g de tofu fumé en dés ou 40 g "
                    "d'allumettes de jambon"
                ),
                interest=(
                    "Moins de graisses saturées. Version tofu = protéines végétales"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="steak haché 20%",
        category="Viandes",
        type=_RECIPE,
        keywords=("steak haché", "steak 20%", "viande hachée grasse"),
        alternatives=(
            Alternative(
                name="Steak 5% ou pavé de volaille",
                equivalence=(
                    "100 g de steak 20% → 100 g de steak 5% ou 120 g de filet "
                    "de poulet"
                ),
                interest="Moins de lipides saturés, apport protéique conservé",
            ),
        ),
    ),
    Equivalence(
        ingredient="panure frite",
        category="Panures",
        type=_RECIPE,
        keywords=("panure frite", "escalope panée frite", "pané frit"),
        alternatives=(
            Alternative(
                name="Panure aux flocons d'avoine + cuisson au four",
                equivalence=(
                    "1 escalope panée frite → 1 escalope panée aux flocons "
                    "d'avoine ou chapelure + cuisson au four"
                ),
                interest="Moins de graisses, plus de fibres",
            ),
        ),
    ),
    # Autres liants
    Equivalence(
        ingredient="psyllium",
        category="Liants",
        type=_RECIPE,
        keywords=("psyllium", "psyllium blond"),
        alternatives=(
            Alternative(
                name="Psyllium blond",
                equivalence="1 c. à café de psyllium + 3 à 4 c. à soupe d'eau",
                interest="Très riche en fibres solubles",
                ideal_for=(
                    "Donner du moelleux aux pains sans gluten, lier des galettes "
                    "de légumes"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="gélatine",
        category="Liants",
        type=_RECIPE,
        keywords=("gélatine", "gélatine animale", "feuille gélatine"),
        alternatives=(
            Alternative(
                name="Agar agar",
                equivalence="1 feuille de gélatine (2 g) → environ 1 g d'agar agar",
                interest="100% végétal, sans graisses ni sucres",
                remarks="À faire bouillir dans le liquide au moins 30 secondes",
            ),
        ),
    ),
    Equivalence(
        ingredient="flocons céréales",
        category="Farines - Flocons",
        type=_RECIPE,
        keywords=("flocons", "flocons avoine", "flocons sarrasin", "flocons épeautre"),
        alternatives=(
            Alternative(
                name="Flocons de céréales",
                equivalence=(
                    "Remplacer une partie de la panure ou de la farine par des "
                    "flocons d'avoine, sarrasin ou épeautre"
                ),
                interest="Fibres, texture intéressante",
            ),
        ),
    ),
    # Snacks et accompagnements
    Equivalence(
        ingredient="chips",
        category="Snacks",
        type=_RECIPE,
        keywords=("chips", "chips classiques", "chips pommes de terre"),
        alternatives=(
            Alternative(
                name="Pois chiches rôtis",
                equivalence=(
                    "30 g de chips → 30 g de pois chiches rôtis au four avec épices"
                ),
                interest=(
                    "Plus de protéines et de fibres, moins de graisses saturées"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="croûtons",
        category="Accompagnements",
        type=_RECIPE,
        keywords=("croûtons", "croûtons gras", "croûtons soupe"),
        alternatives=(
            Alternative(
                name="Pain complet grillé frotté à l'ail",
                equivalence="20 g de croûtons → 20 g de pain complet grillé en dés",
                interest=(
                    "Plus de fibres, graisses maîtrisées selon la quantité d'huile"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="biscuits apéritifs",
        category="Snacks",
        type=_RECIPE,
        keywords=("biscuits apéritifs", "biscuits apéro", "apéritif"),
        alternatives=(
            Alternative(
                name="Mélange fruits secs et oléagineux",
                equivalence=(
                    "30 g de biscuits apéritifs → 20 g de mélange noix amandes "
                    "+ 10 g de fruits secs"
                ),
                interest="Meilleure qualité de graisses, plus rassasiant",
            ),
        ),
    ),
)

_NUTRITION_EQUIVALENCES: tuple[Equivalence, ...] = (
    # Petit-déjeuner
    Equivalence(
        ingredient="céréales chocolatées",
        category="Petits déjeuners",
        type=_NUTRITION,
        keywords=(
            "céréales chocolatées",
            "céréales sucrées",
            "céréales petit déjeuner",
            "céréales industrielles",
        ),
        alternatives=(
            Alternative(
                name="Muesli maison",
                equivalence=(
                    "40 g de céréales sucrées → 40 g de flocons d'avoine + 5 g "
                    "de noix ou amandes + 5 g de raisins secs"
                ),
                interest=(
                    "Plus de fibres, meilleure satiété, moins de sucres ajoutés"
                ),
                remarks=(
                    'Tu peux "caraméliser" légèrement au four avec un peu de miel '
                    "pour rester gourmand"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="granola industriel",
        category="Petits déjeuners",
        type=_NUTRITION,
        keywords=("granola", "granola industriel", "granola sucré"),
        alternatives=(
            Alternative(
                name='Granola maison "light"',
                equivalence=(
                    "50 g granola du commerce → 40 g granola maison avec flocons "
                    "d'avoine, oléagineux, 1 à 2 c. à café de miel pour 40 g"
                ),
                interest="Contrôle des sucres et des graisses ajoutées",
            ),
        ),
    ),
    Equivalence(
        ingredient="croissant",
        category="Petits déjeuners",
        type=_NUTRITION,
        keywords=("croissant", "pain au chocolat", "viennoiserie"),
        alternatives=(
            Alternative(
                name="Pain complet + purée d'oléagineux + fruit",
                equivalence=(
                    "1 croissant ≈ 200 à 250 kcal → 1 tranche de pain complet "
                    "+ 10 g de purée d'amande + 1 fruit"
                ),
                interest=(
                    "Moins de graisses saturées, plus de fibres et de protéines"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="brioche",
        category="Petits déjeuners",
        type=_NUTRITION,
        keywords=("brioche", "brioche au beurre"),
        alternatives=(
            Alternative(
                name="Pain aux graines + fromage frais / ricotta",
                equivalence=(
                    "60 g de brioche → 40 à 50 g de pain aux graines "
                    "+ 15 g de fromage frais"
                ),
                interest="Plus rassasiant, meilleur profil lipidique",
            ),
        ),
    ),
    # Boissons
    Equivalence(
        ingredient="soda",
        category="Boissons",
        type=_NUTRITION,
        keywords=("soda", "soda classique", "boisson sucrée", "sodas"),
        alternatives=(
            Alternative(
                name="Eau gazeuse + jus de citron + sirop",
                equivalence=(
                    "250 ml soda → 250 ml d'eau gazeuse + 1 c. à café de sirop "
                    "ou de jus de citron + quelques glaçons"
                ),
                interest="Réduction majeure du sucre",
                variant=(
                    "Eau + rondelles de citron, orange, menthe ou fruits "
                    "rouges congelés"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="jus de fruits",
        category="Boissons",
        type=_NUTRITION,
        keywords=("jus de fruits", "jus d'orange", "jus pur"),
        alternatives=(
            Alternative(
                name="Fruit entier + verre d'eau",
                equivalence="200 ml de jus d'orange → 1 orange entière + 1 verre d'eau",
                interest="Plus de fibres, satiété supérieure",
            ),
        ),
    ),
    Equivalence(
        ingredient="café sucré",
        category="Boissons",
        type=_NUTRITION,
        keywords=("café", "café sucré", "café avec sucre"),
        alternatives=(
            Alternative(
                name="Café avec 1 sucre + cannelle ou cacao non sucré",
                equivalence="2 morceaux de sucre → 1 morceau + épices",
                interest=(
                    "Réduction progressive des sucres, utile pour diminution "
                    "sans frustration"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="chocolat chaud",
        category="Boissons",
        type=_NUTRITION,
        keywords=("chocolat chaud", "chocolat en poudre", "chocolat sucré"),
        alternatives=(
            Alternative(
                name="Chocolat chaud cacao + lait",
                equivalence=(
                    "1 sachet de chocolat en poudre sucré → 1 c. à soupe de cacao "
                    "non sucré + 1 à 2 c. à café de sucre ou miel"
                ),
                interest="Moins de sucres ajoutés, dose contrôlée",
            ),
        ),
    ),
    # Féculents
    Equivalence(
        ingredient="riz blanc",
        category="Féculents",
        type=_NUTRITION,
        keywords=("riz blanc", "riz standard", "riz"),
        alternatives=(
            Alternative(
                name="Riz basmati complet ou semi-complet",
                equivalence=(
                    "60 g crus de riz blanc → 60 g crus de riz basmati complet"
                ),
                interest="IG plus bas, plus de fibres",
            ),
            Alternative(
                name="Mélange riz + lentilles corail",
                equivalence="60 g de riz blanc → 40 g de riz + 20 g de lentilles corail",
                interest="Plus de protéines, plus de fibres",
                remarks="Cuisson ensemble dans une grande quantité d'eau",
            ),
        ),
    ),
    Equivalence(
        ingredient="pâtes blanches",
        category="Féculents",
        type=_NUTRITION,
        keywords=("pâtes", "pâtes blanches", "pâtes classiques"),
        alternatives=(
            Alternative(
                name="Pâtes complètes ou aux légumineuses",
                equivalence=(
                    "70 g de pâtes blanches → 70 g de pâtes complètes ou de pâtes "
                    "aux pois chiches ou lentilles"
                ),
                interest="Plus de protéines végétales, plus de fibres",
            ),
            Alternative(
                name="Pâtes + sauce tomate maison + légumes",
                equivalence=(
                    "70 g pâtes + 100 ml sauce crème → 70 g pâtes + 150 g de "
                    "sauce tomate aux légumes"
                ),
                interest=(
                    "Moins de graisses, plus de fibres et de volume rassasiant"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="pain blanc",
        category="Féculents",
        type=_NUTRITION,
        keywords=("pain blanc", "baguette", "pain"),
        alternatives=(
            Alternative(
                name="Pain complet ou pain aux graines",
                equivalence="40 g de baguette → 40 g de pain complet ou aux graines",
                interest="Plus de fibres, meilleur contrôle de la glycémie",
            ),
        ),
    ),
    # Bases de pâte
    Equivalence(
        ingredient="pâte brisée",
        category="Bases de pâte",
        type=_NUTRITION,
        keywords=("pâte brisée", "pâte à tarte", "pâte au beurre"),
        alternatives=(
            Alternative(
                name="Pâte à tarte à l'huile",
                equivalence=(
                    "250 g farine 125 g beurre → 250 g farine 70 g huile d'olive "
                    "ou colza + eau"
                ),
                interest="Moins de graisses saturées, meilleur profil AG",
            ),
        ),
    ),
    Equivalence(
        ingredient="pâte feuilletée",
        category="Bases de pâte",
        type=_NUTRITION,
        keywords=("pâte feuilletée", "pâte feuilletée industrielle"),
        alternatives=(
            Alternative(
                name='Base "carrée" de feuilles de brick',
                equivalence=(
                    "1 pâte feuilletée → 3 à 4 feuilles de brick légèrement "
                    "huilées superposées"
                ),
                interest=(
                    "Moins de graisses, plus légère pour quiches et tartes fines"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="pâte pizza",
        category="Bases de pâte",
        type=_NUTRITION,
        keywords=("pâte pizza", "pizza", "pâte pizza riche"),
        alternatives=(
            Alternative(
                name='Pâte à pizza maison "yaourt"',
                equivalence=(
                    "250 g de farine 4 c. à soupe d'huile → 250 g farine + 200 g "
                    "de yaourt nature + 1 c. à soupe d'huile + levure"
                ),
                interest="Moins de graisses, un peu plus de protéines",
                remarks='Très pratique pour pizzas rapides type "patient pressé"',
            ),
        ),
    ),
    # Sauces et condiments
    Equivalence(
        ingredient="mayonnaise",
        category="Sauces et condiments",
        type=_NUTRITION,
        keywords=("mayonnaise", "mayo", "mayonnaise classique"),
        alternatives=(
            Alternative(
                name="Sauce yaourt moutarde",
                equivalence=(
                    "1 c. à soupe de mayo ≈ 100 kcal → 1 c. à soupe de sauce "
                    "yaourt nature + moutarde + citron ≈ 15 à 20 kcal"
                ),
                interest=(
                    "Réduction massive des graisses, peut être utilisée en grande "
                    "quantité sans exploser les calories"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="sauce cocktail",
        category="Sauces et condiments",
        type=_NUTRITION,
        keywords=("sauce cocktail", "sauce cocktail classique"),
        alternatives=(
            Alternative(
                name="Sauce yaourt ketchup",
                equivalence=(
                    "1 portion sauce cocktail classique → 1 c. à soupe yaourt "
                    "+ 1 c. à café ketchup + paprika"
                ),
                interest="Beaucoup moins de lipides",
            ),
        ),
    ),
    Equivalence(
        ingredient="ketchup",
        category="Sauces et condiments",
        type=_NUTRITION,
        keywords=("ketchup", "ketchup industriel"),
        alternatives=(
            Alternative(
                name="Coulis de tomate réduit + épices",
                equivalence=(
                    "1 c. à soupe ketchup → 1 c. à soupe coulis de tomate réduit "
                    "avec un peu de vinaigre et épices"
                ),
                interest='Moins de sucre, plus de tomate "vraie"',
            ),
        ),
    ),
    Equivalence(
        ingredient="sauce teriyaki",
        category="Sauces et condiments",
        type=_NUTRITION,
        keywords=("sauce teriyaki", "sauce sucrée", "teriyaki"),
        alternatives=(
            Alternative(
                name="Sauce soja réduite en sel + miel + jus d'orange",
                equivalence=(
                    "2 c. à soupe sauce soja + 1 c. à café de miel "
                    "+ 2 c. à soupe jus d'orange"
                ),
                interest=(
                    "Tu contrôles la quantité de sucre, profil plus intéressant "
                    "si utilisé avec beaucoup de légumes"
                ),
            ),
        ),
    ),
    # Desserts
    Equivalence(
        ingredient="glace",
        category="Desserts",
        type=_NUTRITION,
        keywords=("glace", "crème glacée", "glace riche"),
        alternatives=(
            Alternative(
                name='Banane glacée "nice cream"',
                equivalence=(
                    "100 g de glace → 100 g de banane congelée mixée avec un peu "
                    "de lait ou boisson végétale"
                ),
                interest="Sans graisses ajoutées, sucre uniquement du fruit",
                variant="Ajout de cacao, beurre d'oléagineux, framboises surgelées",
            ),
            Alternative(
                name="Skyr ou yaourt nature glacé",
                equivalence=(
                    "100 g de glace → 100 g de skyr + 1 c. à café de miel "
                    "+ fruits rouges congelés mixés"
                ),
                interest="Plus de protéines, moins de graisses",
            ),
        ),
    ),
    # Protéines
    Equivalence(
        ingredient="saucisses",
        category="Protéines",
        type=_NUTRITION,
        keywords=("saucisses", "chipolatas", "saucisse"),
        alternatives=(
            Alternative(
                name="Saucisses de volaille ou boulettes maison",
                equivalence=(
                    "1 chipolata → 1 saucisse de volaille ou 3 à 4 boulettes "
                    "maison à base de volaille et légumes"
                ),
                interest=(
                    "Moins de graisses saturées, moins de sel si fait maison"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="bacon",
        category="Protéines",
        type=_NUTRITION,
        keywords=("bacon", "bacon classique"),
        alternatives=(
            Alternative(
                name="Bacon de dinde ou jambon grillé",
                equivalence=(
                    "2 tranches de bacon → 2 tranches de jambon blanc poêlées "
                    "rapidement"
                ),
                interest=(
                    "Moins gras, similaire en utilisation pour sandwichs ou brunch"
                ),
            ),
        ),
    ),
    Equivalence(
        ingredient="poulet curry",
        category="Protéines",
        type=_NUTRITION,
        keywords=("poulet", "poulet curry", "curry poulet"),
        alternatives=(
            Alternative(
                name="Pois chiches ou haricots blancs",
                equivalence="100 g de poulet → 120 à 150 g de pois chiches cuits",
                interest="Protéines végétales, fibres",
                remarks="À combiner avec légumes, lait de coco allégé ou yaourt",
            ),
        ),
    ),
    Equivalence(
        ingredient="steak haché",
        category="Protéines",
        type=_NUTRITION,
        keywords=("steak haché", "steak", "burger"),
        alternatives=(
            Alternative(
                name="Galette de haricots rouges ou noirs",
                equivalence=(
                    "1 steak haché → 1 galette faite avec 80 à 100 g de haricots "
                    "rouges cuits + flocons d'avoine + épices"
                ),
                interest="Riche en fibres, moins gras",
            ),
        ),
    ),
    # Accompagnements et fromages
    Equivalence(
        ingredient="frites",
        category="Accompagnements",
        type=_NUTRITION,
        keywords=("frites", "frite", "pommes frites"),
        alternatives=(
            Alternative(
                name="Potatoes au four + crudités",
                equivalence=(
                    "150 g de frites → 150 g de pommes de terre au four avec peu "
                    "d'huile + 100 g de crudités"
                ),
                interest="Moins de graisses, plus de volume dans l'assiette",
            ),
        ),
    ),
    Equivalence(
        ingredient="fromage portion",
        category="Fromages",
        type=_NUTRITION,
        keywords=("fromage", "portion fromage", "fromage généreux"),
        alternatives=(
            Alternative(
                name="Moitié fromage moitié crudités ou fruits",
                equivalence=(
                    "40 g de fromage → 20 g de fromage + crudités ou 1 petit fruit"
                ),
                interest=(
                    "Satisfait l'envie de fromage, limite les graisses saturées"
                ),
            ),
        ),
    ),
)

EQUIVALENCES: tuple[Equivalence, ...] = _RECIPE_EQUIVALENCES + _NUTRITION_EQUIVALENCES
