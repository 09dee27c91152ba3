"""
Reference catalog of real celestial bodies for nearest-match display.

Each body carries a mean radius and a mass, so the calculator can tell the
user which known object is closest to the configuration on the sliders.

SOURCES (mean radius, mass):
  Solar System planets, moons, dwarf planets: NASA/JPL Planetary Fact Sheets
    and JPL Solar System Dynamics physical parameters
  Small bodies: spacecraft flyby/rendezvous results (NEAR, Hayabusa,
    Hayabusa2, OSIRIS-REx, DART, Rosetta, Deep Impact, Dawn)
  Stars: interferometric radii and dynamical masses (Gaia DR3, CHARA,
    VLTI) where available; spectroscopic estimates otherwise
  White dwarfs: Gaia parallax + gravitational redshift
  Neutron stars: NICER (Riley+2021, Miller+2021), Shapiro delay timing;
    radii of pulsars without NICER data are canonical 10-13 km estimates
  Black holes: dynamical masses (EHT, GRAVITY, X-ray binaries, LIGO/Virgo);
    the radius listed is the Schwarzschild radius of that mass

Masses and radii of bodies with large published uncertainties are
central values; they are good to the log-scale precision the nearest
match uses.

Each entry contains:
  id: unique identifier
  name: display name (French)
  name_en: display name (English)
  category: one of CATEGORIES
  mass_kg: mass in kilograms
  radius_km: mean radius in kilometres

IMPORTANT: No unicode characters (Windows charmap constraint).
"""

from physics.constants import (
    SOLAR_MASS,
    SOLAR_RADIUS,
    EARTH_MASS,
    EARTH_RADIUS,
    JUPITER_MASS,
    JUPITER_RADIUS,
)
from physics.schwarzschild import schwarzschild_radius

CATEGORIES = (
    "planet",
    "exoplanet",
    "dwarf_planet",
    "moon",
    "asteroid",
    "comet",
    "brown_dwarf",
    "star",
    "white_dwarf",
    "neutron_star",
    "black_hole",
)


def _body(body_id, name, name_en, category, mass_kg, radius_km):
    return {
        "id": body_id,
        "name": name,
        "name_en": name_en,
        "category": category,
        "mass_kg": mass_kg,
        "radius_km": radius_km,
    }


def _star(body_id, name, name_en, category, m_solar, r_solar):
    return _body(body_id, name, name_en, category,
                 m_solar * SOLAR_MASS, r_solar * SOLAR_RADIUS)


def _black_hole(body_id, name, name_en, m_solar):
    mass = m_solar * SOLAR_MASS
    return _body(body_id, name, name_en, "black_hole",
                 mass, schwarzschild_radius(mass))


PLANETS = [
    _body("mercury", "Mercure", "Mercury", "planet", 3.301e23, 2439.7),
    _body("venus", "V\u00e9nus", "Venus", "planet", 4.867e24, 6051.8),
    _body("earth", "Terre", "Earth", "planet", EARTH_MASS, EARTH_RADIUS),
    _body("mars", "Mars", "Mars", "planet", 6.417e23, 3389.5),
    _body("jupiter", "Jupiter", "Jupiter", "planet", JUPITER_MASS, JUPITER_RADIUS),
    _body("saturn", "Saturne", "Saturn", "planet", 5.683e26, 58232.0),
    _body("uranus", "Uranus", "Uranus", "planet", 8.681e25, 25362.0),
    _body("neptune", "Neptune", "Neptune", "planet", 1.024e26, 24622.0),
]

EXOPLANETS = [
    _body("trappist_1b", "TRAPPIST-1 b", "TRAPPIST-1 b", "exoplanet",
          1.374 * EARTH_MASS, 1.116 * EARTH_RADIUS),
    _body("trappist_1d", "TRAPPIST-1 d", "TRAPPIST-1 d", "exoplanet",
          0.388 * EARTH_MASS, 0.788 * EARTH_RADIUS),
    _body("trappist_1e", "TRAPPIST-1 e", "TRAPPIST-1 e", "exoplanet",
          0.692 * EARTH_MASS, 0.920 * EARTH_RADIUS),
    _body("gj_1214b", "GJ 1214 b", "GJ 1214 b", "exoplanet",
          8.17 * EARTH_MASS, 2.742 * EARTH_RADIUS),
    _body("cnc_55e", "55 Cancri e", "55 Cancri e", "exoplanet",
          7.99 * EARTH_MASS, 1.875 * EARTH_RADIUS),
    _body("kepler_10b", "Kepler-10 b", "Kepler-10 b", "exoplanet",
          3.26 * EARTH_MASS, 1.47 * EARTH_RADIUS),
    _body("hd_209458b", "HD 209458 b (Osiris)", "HD 209458 b (Osiris)", "exoplanet",
          0.69 * JUPITER_MASS, 1.38 * JUPITER_RADIUS),
    _body("wasp_12b", "WASP-12 b", "WASP-12 b", "exoplanet",
          1.47 * JUPITER_MASS, 1.90 * JUPITER_RADIUS),
    _body("wasp_17b", "WASP-17 b", "WASP-17 b", "exoplanet",
          0.48 * JUPITER_MASS, 1.99 * JUPITER_RADIUS),
    _body("kelt_9b", "KELT-9 b", "KELT-9 b", "exoplanet",
          2.88 * JUPITER_MASS, 1.89 * JUPITER_RADIUS),
]

DWARF_PLANETS = [
    _body("ceres", "C\u00e9r\u00e8s", "Ceres", "dwarf_planet", 9.384e20, 469.7),
    _body("pluto", "Pluton", "Pluto", "dwarf_planet", 1.303e22, 1188.3),
    _body("eris", "\u00c9ris", "Eris", "dwarf_planet", 1.660e22, 1163.0),
    _body("haumea", "Haum\u00e9a", "Haumea", "dwarf_planet", 4.006e21, 798.0),
    _body("makemake", "Mak\u00e9mak\u00e9", "Makemake", "dwarf_planet", 3.1e21, 715.0),
    _body("gonggong", "Gonggong", "Gonggong", "dwarf_planet", 1.75e21, 615.0),
    _body("quaoar", "Quaoar", "Quaoar", "dwarf_planet", 1.2e21, 545.0),
    _body("orcus", "Orcus", "Orcus", "dwarf_planet", 6.3e20, 458.0),
    _body("sedna", "Sedna", "Sedna", "dwarf_planet", 1.0e21, 498.0),
]

MOONS = [
    _body("moon", "Lune", "Moon", "moon", 7.342e22, 1737.4),
    _body("phobos", "Phobos", "Phobos", "moon", 1.0659e16, 11.27),
    _body("deimos", "D\u00e9imos", "Deimos", "moon", 1.4762e15, 6.2),
    # Jupiter
    _body("io", "Io", "Io", "moon", 8.932e22, 1821.6),
    _body("europa", "Europe", "Europa", "moon", 4.800e22, 1560.8),
    _body("ganymede", "Ganym\u00e8de", "Ganymede", "moon", 1.482e23, 2634.1),
    _body("callisto", "Callisto", "Callisto", "moon", 1.076e23, 2410.3),
    _body("amalthea", "Amalth\u00e9e", "Amalthea", "moon", 2.08e18, 83.5),
    _body("himalia", "Himalia", "Himalia", "moon", 4.2e18, 75.0),
    _body("thebe", "Th\u00e9b\u00e9", "Thebe", "moon", 4.3e17, 49.3),
    _body("metis", "M\u00e9tis", "Metis", "moon", 3.6e16, 21.5),
    # Saturn
    _body("mimas", "Mimas", "Mimas", "moon", 3.75e19, 198.2),
    _body("enceladus", "Encelade", "Enceladus", "moon", 1.080e20, 252.1),
    _body("tethys", "T\u00e9thys", "Tethys", "moon", 6.175e20, 531.1),
    _body("dione", "Dion\u00e9", "Dione", "moon", 1.095e21, 561.4),
    _body("rhea", "Rh\u00e9a", "Rhea", "moon", 2.307e21, 763.8),
    _body("titan", "Titan", "Titan", "moon", 1.345e23, 2574.7),
    _body("hyperion", "Hyp\u00e9rion", "Hyperion", "moon", 5.62e18, 135.0),
    _body("iapetus", "Japet", "Iapetus", "moon", 1.806e21, 734.5),
    _body("phoebe", "Phob\u00e9", "Phoebe", "moon", 8.29e18, 106.5),
    _body("janus", "Janus", "Janus", "moon", 1.9e18, 89.5),
    _body("epimetheus", "\u00c9pim\u00e9th\u00e9e", "Epimetheus", "moon", 5.3e17, 58.1),
    _body("prometheus", "Prom\u00e9th\u00e9e", "Prometheus", "moon", 1.6e17, 43.1),
    _body("pandora", "Pandore", "Pandora", "moon", 1.4e17, 40.7),
    _body("atlas", "Atlas", "Atlas", "moon", 6.6e15, 15.1),
    _body("pan", "Pan", "Pan", "moon", 4.95e15, 14.1),
    # Uranus
    _body("miranda", "Miranda", "Miranda", "moon", 6.4e19, 235.8),
    _body("ariel", "Ariel", "Ariel", "moon", 1.251e21, 578.9),
    _body("umbriel", "Umbriel", "Umbriel", "moon", 1.275e21, 584.7),
    _body("titania", "Titania", "Titania", "moon", 3.40e21, 788.9),
    _body("oberon", "Ob\u00e9ron", "Oberon", "moon", 3.076e21, 761.4),
    _body("puck", "Puck", "Puck", "moon", 2.9e18, 81.0),
    # Neptune
    _body("triton", "Triton", "Triton", "moon", 2.139e22, 1353.4),
    _body("proteus", "Prot\u00e9e", "Proteus", "moon", 4.4e19, 210.0),
    _body("nereid", "N\u00e9r\u00e9ide", "Nereid", "moon", 3.1e19, 170.0),
    _body("larissa", "Larissa", "Larissa", "moon", 4.2e18, 97.0),
    # Dwarf planet satellites
    _body("charon", "Charon", "Charon", "moon", 1.586e21, 606.0),
    _body("nix", "Nix", "Nix", "moon", 4.5e16, 19.3),
    _body("hydra", "Hydra", "Hydra", "moon", 4.8e16, 19.0),
    _body("dysnomia", "Dysnomie", "Dysnomia", "moon", 8.2e19, 307.5),
    _body("hiiaka", "Hi'iaka", "Hi'iaka", "moon", 1.79e19, 160.0),
    _body("vanth", "Vanth", "Vanth", "moon", 8.7e19, 221.0),
]

ASTEROIDS = [
    _body("vesta", "Vesta", "Vesta", "asteroid", 2.590e20, 262.7),
    _body("pallas", "Pallas", "Pallas", "asteroid", 2.04e20, 256.0),
    _body("hygiea", "Hygie", "Hygiea", "asteroid", 8.67e19, 217.0),
    _body("interamnia", "Interamnia", "Interamnia", "asteroid", 3.5e19, 166.0),
    _body("europa_52", "(52) Europe", "(52) Europa", "asteroid", 2.4e19, 157.0),
    _body("davida", "Davida", "Davida", "asteroid", 2.7e19, 149.5),
    _body("sylvia", "Sylvia", "Sylvia", "asteroid", 1.48e19, 136.5),
    _body("eunomia", "Eunomia", "Eunomia", "asteroid", 3.12e19, 135.0),
    _body("juno", "Junon", "Juno", "asteroid", 2.67e19, 127.0),
    _body("cybele", "Cyb\u00e8le", "Cybele", "asteroid", 1.4e19, 124.0),
    _body("psyche", "Psych\u00e9", "Psyche", "asteroid", 2.29e19, 113.0),
    _body("hektor", "Hector", "Hektor", "asteroid", 7.9e18, 112.0),
    _body("lutetia", "Lut\u00e8ce", "Lutetia", "asteroid", 1.7e18, 49.0),
    _body("mathilde", "Mathilde", "Mathilde", "asteroid", 1.033e17, 26.4),
    _body("ida", "Ida", "Ida", "asteroid", 4.2e16, 15.7),
    _body("eros", "\u00c9ros", "Eros", "asteroid", 6.687e15, 8.42),
    _body("gaspra", "Gaspra", "Gaspra", "asteroid", 2.5e15, 6.1),
    _body("arrokoth", "Arrokoth", "Arrokoth", "asteroid", 7.5e14, 9.0),
    _body("ryugu", "Ryugu", "Ryugu", "asteroid", 4.5e11, 0.448),
    _body("didymos", "Didymos", "Didymos", "asteroid", 5.6e11, 0.39),
    _body("bennu", "Bennu", "Bennu", "asteroid", 7.329e10, 0.2452),
    _body("apophis", "Apophis", "Apophis", "asteroid", 6.1e10, 0.17),
    _body("itokawa", "Itokawa", "Itokawa", "asteroid", 3.51e10, 0.165),
    _body("dimorphos", "Dimorphos", "Dimorphos", "asteroid", 4.3e9, 0.0755),
]

COMETS = [
    _body("hale_bopp", "Hale-Bopp", "Hale-Bopp", "comet", 1.3e16, 30.0),
    _body("halley", "Com\u00e8te de Halley", "Halley's Comet", "comet", 2.2e14, 5.5),
    _body("tempel_1", "Tempel 1", "Tempel 1", "comet", 7.2e13, 3.0),
    _body("borrelly", "Borrelly", "Borrelly", "comet", 2.0e13, 2.4),
    _body("wild_2", "Wild 2", "Wild 2", "comet", 2.3e13, 2.1),
    _body("churyumov_gerasimenko", "Tchourioumov-Guerassimenko",
          "Churyumov-Gerasimenko", "comet", 9.982e12, 1.65),
    _body("hartley_2", "Hartley 2", "Hartley 2", "comet", 2.5e11, 0.58),
]

BROWN_DWARFS = [
    _body("wise_0855", "WISE 0855-0714", "WISE 0855-0714", "brown_dwarf",
          5.0 * JUPITER_MASS, 1.0 * JUPITER_RADIUS),
    _body("luhman_16a", "Luhman 16 A", "Luhman 16 A", "brown_dwarf",
          34.2 * JUPITER_MASS, 0.85 * JUPITER_RADIUS),
    _body("luhman_16b", "Luhman 16 B", "Luhman 16 B", "brown_dwarf",
          27.9 * JUPITER_MASS, 0.83 * JUPITER_RADIUS),
    _body("epsilon_indi_ba", "Epsilon Indi Ba", "Epsilon Indi Ba", "brown_dwarf",
          66.9 * JUPITER_MASS, 0.80 * JUPITER_RADIUS),
    _body("epsilon_indi_bb", "Epsilon Indi Bb", "Epsilon Indi Bb", "brown_dwarf",
          53.25 * JUPITER_MASS, 0.78 * JUPITER_RADIUS),
]

STARS = [
    _star("sun", "Soleil", "Sun", "star", 1.0, 1.0),
    # Red dwarfs
    _star("trappist_1", "TRAPPIST-1", "TRAPPIST-1", "star", 0.0898, 0.1192),
    _star("wolf_359", "Wolf 359", "Wolf 359", "star", 0.110, 0.144),
    _star("proxima_centauri", "Proxima du Centaure", "Proxima Centauri", "star",
          0.1221, 0.1542),
    _star("barnards_star", "\u00c9toile de Barnard", "Barnard's Star", "star",
          0.162, 0.187),
    _star("ross_128", "Ross 128", "Ross 128", "star", 0.168, 0.197),
    _star("luytens_star", "\u00c9toile de Luyten", "Luyten's Star", "star", 0.26, 0.35),
    _star("kapteyns_star", "\u00c9toile de Kapteyn", "Kapteyn's Star", "star",
          0.281, 0.291),
    _star("gliese_581", "Gliese 581", "Gliese 581", "star", 0.31, 0.299),
    _star("lalande_21185", "Lalande 21185", "Lalande 21185", "star", 0.39, 0.392),
    # Sun-like and nearby
    _star("cygni_61a", "61 Cygni A", "61 Cygni A", "star", 0.70, 0.665),
    _star("tau_ceti", "Tau Ceti", "Tau Ceti", "star", 0.783, 0.793),
    _star("epsilon_eridani", "Epsilon Eridani", "Epsilon Eridani", "star",
          0.82, 0.735),
    _star("alpha_centauri_b", "Alpha du Centaure B", "Alpha Centauri B", "star",
          0.909, 0.8591),
    _star("alpha_centauri_a", "Alpha du Centaure A", "Alpha Centauri A", "star",
          1.079, 1.2175),
    _star("tabbys_star", "\u00c9toile de Tabby", "Tabby's Star", "star", 1.43, 1.58),
    _star("procyon_a", "Procyon A", "Procyon A", "star", 1.499, 2.048),
    # Main sequence A/B/O
    _star("altair", "Alta\u00efr", "Altair", "star", 1.86, 1.79),
    _star("fomalhaut", "Fomalhaut", "Fomalhaut", "star", 1.92, 1.842),
    _star("sirius_a", "Sirius A", "Sirius A", "star", 2.063, 1.711),
    _star("vega", "V\u00e9ga", "Vega", "star", 2.135, 2.36),
    _star("regulus", "R\u00e9gulus", "Regulus", "star", 3.8, 4.35),
    _star("achernar", "Achernar", "Achernar", "star", 6.7, 9.16),
    _star("bellatrix", "Bellatrix", "Bellatrix", "star", 7.7, 5.75),
    _star("spica", "Spica", "Spica", "star", 11.43, 7.47),
    _star("zeta_puppis", "Naos (Zeta Puppis)", "Naos (Zeta Puppis)", "star",
          56.1, 14.0),
    _star("r136a1", "R136a1", "R136a1", "star", 196.0, 42.7),
    _star("eta_carinae_a", "\u00c9ta Car\u00e8ne A", "Eta Carinae A", "star",
          100.0, 240.0),
    # Giants
    _star("pollux", "Pollux", "Pollux", "star", 1.91, 9.06),
    _star("capella_aa", "Capella Aa", "Capella Aa", "star", 2.57, 11.98),
    _star("arcturus", "Arcturus", "Arcturus", "star", 1.08, 25.4),
    _star("polaris", "\u00c9toile polaire", "Polaris", "star", 5.4, 37.5),
    _star("aldebaran", "Ald\u00e9baran", "Aldebaran", "star", 1.16, 44.13),
    _star("canopus", "Canopus", "Canopus", "star", 9.0, 71.0),
    _star("rigel", "Rigel", "Rigel", "star", 21.0, 78.9),
    _star("deneb", "Deneb", "Deneb", "star", 19.0, 203.0),
    _star("mira", "Mira", "Mira", "star", 1.2, 332.0),
    # Supergiants
    _star("antares", "Antar\u00e8s", "Antares", "star", 12.0, 680.0),
    _star("betelgeuse", "B\u00e9telgeuse", "Betelgeuse", "star", 16.5, 764.0),
    _star("uy_scuti", "UY Scuti", "UY Scuti", "star", 10.0, 909.0),
    _star("mu_cephei", "Mu C\u00e9ph\u00e9e", "Mu Cephei", "star", 19.2, 972.0),
    _star("vy_canis_majoris", "VY du Grand Chien", "VY Canis Majoris", "star",
          17.0, 1420.0),
]

WHITE_DWARFS = [
    _star("sirius_b", "Sirius B", "Sirius B", "white_dwarf", 1.018, 0.0084),
    _star("procyon_b", "Procyon B", "Procyon B", "white_dwarf", 0.592, 0.01234),
    _star("eridani_40b", "40 Eridani B", "40 Eridani B", "white_dwarf",
          0.573, 0.0136),
    _star("van_maanen", "\u00c9toile de van Maanen", "Van Maanen's Star",
          "white_dwarf", 0.67, 0.011),
    _star("ik_pegasi_b", "IK Pegasi B", "IK Pegasi B", "white_dwarf", 1.15, 0.006),
    _body("ztf_j1901", "ZTF J1901+1458", "ZTF J1901+1458", "white_dwarf",
          1.35 * SOLAR_MASS, 2140.0),
]

NEUTRON_STARS = [
    _body("psr_j0952", "PSR J0952-0607", "PSR J0952-0607", "neutron_star",
          2.35 * SOLAR_MASS, 12.0),
    _body("psr_j0740", "PSR J0740+6620", "PSR J0740+6620", "neutron_star",
          2.08 * SOLAR_MASS, 12.39),
    _body("psr_j0348", "PSR J0348+0432", "PSR J0348+0432", "neutron_star",
          2.01 * SOLAR_MASS, 13.0),
    _body("psr_j1614", "PSR J1614-2230", "PSR J1614-2230", "neutron_star",
          1.908 * SOLAR_MASS, 12.5),
    _body("rx_j1856", "RX J1856.5-3754", "RX J1856.5-3754", "neutron_star",
          1.5 * SOLAR_MASS, 14.0),
    _body("psr_j0030", "PSR J0030+0451", "PSR J0030+0451", "neutron_star",
          1.44 * SOLAR_MASS, 13.02),
    _body("hulse_taylor", "Pulsar de Hulse-Taylor", "Hulse-Taylor Pulsar",
          "neutron_star", 1.438 * SOLAR_MASS, 11.5),
    _body("crab_pulsar", "Pulsar du Crabe", "Crab Pulsar", "neutron_star",
          1.4 * SOLAR_MASS, 10.0),
    _body("vela_pulsar", "Pulsar de Vela", "Vela Pulsar", "neutron_star",
          1.4 * SOLAR_MASS, 11.0),
    _body("sgr_1806", "SGR 1806-20 (magn\u00e9tar)", "SGR 1806-20 (magnetar)",
          "neutron_star", 1.4 * SOLAR_MASS, 10.5),
]

BLACK_HOLES = [
    _black_hole("v404_cygni", "V404 Cygni", "V404 Cygni", 9.0),
    _black_hole("gaia_bh1", "Gaia BH1", "Gaia BH1", 9.62),
    _black_hole("lmc_x1", "LMC X-1", "LMC X-1", 10.91),
    _black_hole("grs_1915", "GRS 1915+105", "GRS 1915+105", 12.4),
    _black_hole("m33_x7", "M33 X-7", "M33 X-7", 15.65),
    _black_hole("cygnus_x1", "Cygnus X-1", "Cygnus X-1", 21.2),
    _black_hole("gaia_bh3", "Gaia BH3", "Gaia BH3", 32.7),
    _black_hole("gw150914", "GW150914 (r\u00e9manent)", "GW150914 (remnant)", 62.0),
    _black_hole("gw190521", "GW190521 (r\u00e9manent)", "GW190521 (remnant)", 142.0),
    _black_hole("sagittarius_a", "Sagittarius A*", "Sagittarius A*", 4.297e6),
    _black_hole("m31_bh", "Trou noir d'Androm\u00e8de (M31*)",
                "Andromeda black hole (M31*)", 1.4e8),
    _black_hole("quasar_3c273", "3C 273", "3C 273", 8.86e8),
    _black_hole("m87", "M87*", "M87*", 6.5e9),
    _black_hole("oj_287", "OJ 287", "OJ 287", 1.8e10),
    _black_hole("holmberg_15a", "Holmberg 15A*", "Holmberg 15A*", 4.0e10),
    _black_hole("ton_618", "TON 618", "TON 618", 6.6e10),
]

CELESTIAL_BODIES = (
    PLANETS
    + EXOPLANETS
    + DWARF_PLANETS
    + MOONS
    + ASTEROIDS
    + COMETS
    + BROWN_DWARFS
    + STARS
    + WHITE_DWARFS
    + NEUTRON_STARS
    + BLACK_HOLES
)

# Quick-pick buttons of the gravitational time dilation experiment
CELESTIAL_PRESETS = [
    {"id": "earth", "name": "Terre", "name_en": "Earth",
     "mass_kg": EARTH_MASS, "radius_km": EARTH_RADIUS},
    {"id": "jupiter", "name": "Jupiter", "name_en": "Jupiter",
     "mass_kg": JUPITER_MASS, "radius_km": JUPITER_RADIUS},
    {"id": "sun", "name": "Soleil", "name_en": "Sun",
     "mass_kg": SOLAR_MASS, "radius_km": SOLAR_RADIUS},
    {"id": "white_dwarf", "name": "Naine Blanche", "name_en": "White Dwarf",
     "mass_kg": SOLAR_MASS * 0.6, "radius_km": 5000.0},
    {"id": "neutron_star", "name": "\u00c9toile \u00e0 Neutrons",
     "name_en": "Neutron Star",
     "mass_kg": SOLAR_MASS * 1.4, "radius_km": 10.0},
]

_BY_ID = {b["id"]: b for b in CELESTIAL_BODIES}


def get_all_bodies():
    """Return every catalog entry, in catalog order."""
    return list(CELESTIAL_BODIES)


def get_body_by_id(body_id):
    """Return a single body by id, or None."""
    return _BY_ID.get(body_id)


def bodies_by_category(category):
    """Return all bodies of one category; unknown categories raise ValueError."""
    if category not in CATEGORIES:
        raise ValueError("Unknown category '{}'".format(category))
    return [b for b in CELESTIAL_BODIES if b["category"] == category]
