from scipy.cluster.hierarchy import linkage, fcluster

from ncdmatrix import NCDEngine, load_config, to_condensed

config = load_config("settings.toml")
engine = NCDEngine.from_config(config)

test_samples = [
    "Increíble película que supera todas las expectativas. Los efectos visuales son impresionantes y la historia te mantiene en el borde del asiento desde el primer minuto hasta el último.",
    "Una experiencia cinematográfica única e inolvidable. El guión es inteligente, los personajes están perfectamente desarrollados y la cinematografía es absolutamente hermosa.",
    "Una completa pérdida de tiempo que no logra conectar con la audiencia. El guión es predecible, las actuaciones son forzadas y la dirección carece de visión clara.",
    "Película decepcionante que desperdicia un gran potencial. Los diálogos son torpes, la trama tiene agujeros enormes y los efectos especiales parecen de bajo presupuesto.",
]


print("Testing NCD symmetric matrix...")

symmetric = engine.symmetric(test_samples)
print(symmetric.round(3))

print("Testing NCD unsymmetric matrix...")

unsymmetric = engine.unsymmetric(test_samples)
print(unsymmetric.round(3))

print("Single pair:", engine.calculate(test_samples[0], test_samples[1]))

engine.set_compression_level("best")
print("Single pair (best):", engine.calculate(test_samples[0], test_samples[1]))

tree = linkage(to_condensed(symmetric), method="average")
print("Clusters:", fcluster(tree, t=2, criterion="maxclust"))

print("Done!")
