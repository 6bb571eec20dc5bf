"""
Initial catalog, inserted on startup when the products collection is empty.
"""
import logging

from catalog import CatalogService
from database import PRODUCTS, Store
from schemas import ProductIn

logger = logging.getLogger(__name__)


def _img(photo: str) -> str:
    return f"https://images.unsplash.com/{photo}?auto=format&fit=crop&q=80&w=800"


SEED_PRODUCTS = [
    ProductIn(
        name="The Velvet Sovereign",
        description="Deep emerald velvet sofa with gold-leaf accents.",
        price=350000,
        category="Living Room",
        image_url=_img("photo-1555041469-a586c61ea9bc"),
        dimensions="220cm x 95cm x 85cm",
        materials="Velvet, Solid Oak, Gold Leaf",
        fabrics="Premium Italian Velvet",
        additional_images=[_img("photo-1493663284031-b7e3aefcae8e"), _img("photo-1540518614846-7eded433c457")],
    ),
    ProductIn(
        name="Ethereal Oak Table",
        description="Hand-carved solid white oak dining table.",
        price=225000,
        category="Dining Room",
        image_url=_img("photo-1577140917170-285929fb55b7"),
        dimensions="240cm x 100cm x 75cm",
        materials="Solid White Oak",
        fabrics="N/A",
        additional_images=[_img("photo-1530018607912-eff2df114f11")],
    ),
    ProductIn(
        name="Celestial Lounge Chair",
        description="Ergonomic lounge chair with premium Italian leather.",
        price=185000,
        category="Living Room",
        image_url=_img("photo-1592078615290-033ee584e267"),
        dimensions="85cm x 90cm x 100cm",
        materials="Italian Leather, Walnut Shell",
        fabrics="Top-grain Italian Leather",
        additional_images=[_img("photo-1586023492125-27b2c045efd7")],
    ),
    ProductIn(
        name="Marble Zenith Console",
        description="Italian Carrara marble top with brushed brass base.",
        price=145000,
        category="Living Room",
        image_url=_img("photo-1533090161767-e6ffed986c88"),
        dimensions="140cm x 40cm x 80cm",
        materials="Carrara Marble, Brass",
        fabrics="N/A",
        additional_images=[_img("photo-1538688598139-682181377e3c")],
    ),
    ProductIn(
        name="Onyx Nightstand",
        description="Minimalist nightstand with black marble and walnut.",
        price=65000,
        category="Bedroom",
        image_url=_img("photo-1532372320572-cda25653a26d"),
        dimensions="50cm x 45cm x 55cm",
        materials="Black Marble, Walnut Wood",
        fabrics="N/A",
        additional_images=[_img("photo-1505691938895-1758d7eaa511")],
    ),
    ProductIn(
        name="Luminous Floor Lamp",
        description="Sculptural floor lamp with hand-blown glass.",
        price=85000,
        category="Decor",
        image_url=_img("photo-1507473885765-e6ed057f782c"),
        dimensions="40cm x 40cm x 160cm",
        materials="Hand-blown Glass, Steel",
        fabrics="N/A",
        additional_images=[_img("photo-1513506003901-1e6a229e2d15")],
    ),
    ProductIn(
        name="Executive Monarch Desk",
        description="Grand mahogany desk with leather inlay.",
        price=420000,
        category="Office",
        image_url=_img("photo-1518455027359-f3f8164ba6bd"),
        dimensions="180cm x 90cm x 76cm",
        materials="Mahogany, Top-grain Leather",
        fabrics="Top-grain Leather Inlay",
        additional_images=[_img("photo-1497215728101-856f4ea42174")],
    ),
    ProductIn(
        name="Zenith Office Chair",
        description="High-back ergonomic chair with mesh and aluminum.",
        price=120000,
        category="Office",
        image_url=_img("photo-1505797149-43b0ad766207"),
        dimensions="70cm x 70cm x 120cm",
        materials="Aluminum, Breathable Mesh",
        fabrics="High-performance Mesh",
        additional_images=[_img("photo-1580480055273-228ff5388ef8")],
    ),
    ProductIn(
        name="Aurelian Bed Frame",
        description="King-size bed frame with brushed gold finish and velvet headboard.",
        price=450000,
        category="Bedroom",
        image_url=_img("photo-1505693415958-4d5ec170653d"),
        dimensions="210cm x 200cm x 140cm",
        materials="Steel, Gold Plating, Velvet",
        fabrics="Plush Champagne Velvet",
        additional_images=[_img("photo-1522771739844-6a9f6d5f14af")],
    ),
    ProductIn(
        name="Nordic Silence Sideboard",
        description="Minimalist sideboard in light ash wood with brass handles.",
        price=175000,
        category="Living Room",
        image_url=_img("photo-1595428774223-ef52624120d2"),
        dimensions="160cm x 45cm x 75cm",
        materials="Ash Wood, Brass",
        fabrics="N/A",
        additional_images=[_img("photo-1532323544230-7191fd51bc1b")],
    ),
    ProductIn(
        name="Ivory Cloud Armchair",
        description="Soft bouclé armchair with organic curves.",
        price=95000,
        category="Living Room",
        image_url=_img("photo-1598300042247-d088f8ab3a91"),
        dimensions="90cm x 85cm x 80cm",
        materials="Bouclé Fabric, Pine Wood",
        fabrics="Premium White Bouclé",
        additional_images=[_img("photo-1567016432779-094069958ea5")],
    ),
    ProductIn(
        name="Obsidian Dining Chair",
        description="Sleek black-stained ash dining chair with leather seat.",
        price=45000,
        category="Dining Room",
        image_url=_img("photo-1503602642458-232111445657"),
        dimensions="45cm x 50cm x 85cm",
        materials="Ash Wood, Leather",
        fabrics="Black Nappa Leather",
        additional_images=[_img("photo-1592078615290-033ee584e267")],
    ),
    ProductIn(
        name="Quartz Coffee Table",
        description="Solid quartz top with geometric steel base.",
        price=115000,
        category="Living Room",
        image_url=_img("photo-1533090161767-e6ffed986c88"),
        dimensions="100cm x 100cm x 35cm",
        materials="Quartz, Powder-coated Steel",
        fabrics="N/A",
        additional_images=[_img("photo-1577140917170-285929fb55b7")],
    ),
    ProductIn(
        name="Amber Glass Vase",
        description="Hand-blown amber glass vase with textured finish.",
        price=12000,
        category="Decor",
        image_url=_img("photo-1581783898377-1c85bf937427"),
        dimensions="20cm x 20cm x 35cm",
        materials="Hand-blown Glass",
        fabrics="N/A",
        additional_images=[_img("photo-1513506003901-1e6a229e2d15")],
    ),
]


def seed_catalog(store: Store) -> int:
    """Insert the seed catalog if there are no products yet. Returns the number inserted."""
    if store[PRODUCTS].count_documents({}) > 0:
        return 0
    catalog = CatalogService(store)
    for product in SEED_PRODUCTS:
        catalog.create_product(product)
    logger.info("Seeded catalog with %d products", len(SEED_PRODUCTS))
    return len(SEED_PRODUCTS)
