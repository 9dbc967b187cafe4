import logging

import pytest

from tombgrid.objmodel import (
    Edge,
    Face,
    Material,
    MaterialColor,
    Mesh,
    Model,
    djb2_hash,
    load_mtl,
    load_obj,
    parse_mtl,
    parse_obj,
    vector_to_color,
)

TRIANGLE = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"


def test_djb2_empty_is_seed():
    assert djb2_hash("") == 5381


def test_djb2_single_char():
    assert djb2_hash("a") == 177670


def test_djb2_str_and_bytes_agree_and_distinguish():
    assert djb2_hash("stone") == djb2_hash(b"stone")
    assert djb2_hash("stone") != djb2_hash("stones")


def test_djb2_stays_within_64_bits():
    assert 0 <= djb2_hash("x" * 200) < 2 ** 64


def test_vector_to_color_full_and_empty():
    assert vector_to_color((1.0, 1.0, 1.0), 1.0) == MaterialColor(255, 255, 255, 255)
    assert vector_to_color((0.0, 0.0, 0.0), 0.0) == MaterialColor(0, 0, 0, 0)


def test_vector_to_color_rounds_half_away_from_zero():
    assert vector_to_color((0.5, 0.5, 0.5), 1.0).r == 128


def test_default_material_is_white():
    assert Material().albedo_color == vector_to_color((1.0, 1.0, 1.0), 1.0)
    assert Material().metalness_color == Material().albedo_color


def test_single_triangle():
    model = parse_obj(TRIANGLE)
    assert len(model.meshes) == 1
    mesh = model.meshes[0]
    assert mesh.vertex_count == 3
    assert mesh.triangle_count == 1
    assert mesh.vertices == [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0]
    assert mesh.normals == [0.0] * 9
    assert mesh.texcoords == [0.0, 1.0] * 3


def test_identity_transform_and_default_material():
    model = parse_obj(TRIANGLE)
    assert model.transform[0] == model.transform[5] == model.transform[10] == model.transform[15] == 1.0
    assert sum(model.transform) == 4.0
    assert model.materials == [Material()]
    assert model.mesh_material == [0]


def test_full_face_indices():
    text = (
        "v 0 0 0\nv 1 0 0\nv 0 1 0\n"
        "vt 0.25 1\n"
        "vn 0 0 1\n"
        "f 1/1/1 2/1/1 3/1/1\n"
    )
    mesh = parse_obj(text).meshes[0]
    assert mesh.texcoords == [0.25, 0.0] * 3
    assert mesh.normals == [0.0, 0.0, 1.0] * 3


def test_vertex_slash_pair_uses_normal_index():
    text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nvn 0 1 0\nvn 1 0 0\nf 1/2 2/2 3/1\n"
    mesh = parse_obj(text).meshes[0]
    assert mesh.normals == [1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0]


def test_negative_and_fractional_values():
    mesh = parse_obj("v -1.5 2.25 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n").meshes[0]
    assert mesh.vertices[:3] == pytest.approx([-1.5, 2.25, 0.0])


def test_w_component_and_comments_ignored():
    text = "# a comment\nv 1 2 3 4\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"
    mesh = parse_obj(text).meshes[0]
    assert mesh.vertices[:3] == [1.0, 2.0, 3.0]
    assert mesh.vertex_count == 3


def test_quad_is_fan_triangulated(caplog):
    text = "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4\nf 1 2 3 4\n"
    with caplog.at_level(logging.WARNING, logger="tombgrid.objmodel"):
        mesh = parse_obj(text).meshes[0]
    assert mesh.triangle_count == 4
    v1, v3, v4 = [0.0, 0.0, 0.0], [1.0, 1.0, 0.0], [0.0, 1.0, 0.0]
    assert mesh.vertices[9:18] == v1 + v3 + v4
    warnings = [r for r in caplog.records if "Triangulation" in r.getMessage()]
    assert len(warnings) == 1


def test_incomplete_face_is_dropped():
    mesh = parse_obj("v 0 0 0\nv 1 0 0\nf 1 2\n").meshes[0]
    assert mesh.triangle_count == 0
    assert mesh.vertices == []


def test_face_with_missing_vertex_raises():
    with pytest.raises(ValueError):
        parse_obj("v 0 0 0\nf 1 2 3\n")


def test_objects_split_into_meshes_with_shared_vertices():
    text = (
        "o first\nv 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"
        "o second\nv 0 0 1\nf 1 2 4\nf 2 3 4\n"
    )
    model = parse_obj(text)
    assert len(model.meshes) == 2
    assert model.meshes[0].triangle_count == 1
    assert model.meshes[1].triangle_count == 2
    assert model.meshes[1].vertices[6:9] == [0.0, 0.0, 1.0]
    assert model.mesh_material == [0, 0]


def test_empty_text():
    model = parse_obj("")
    assert model.meshes == []
    assert model.materials == [Material()]
    assert model.mesh_material == []


def test_parse_mtl_materials():
    text = "newmtl stone\nKa 0.1 0.2 0.3\nKd 1 0 0\nd 2\nnewmtl sand\nKs 0 1 0\nd 0.5\n"
    mats = parse_mtl(text, "assets")
    assert [m.name for m in mats] == ["stone", "sand"]
    assert mats[0].name_hash == djb2_hash("stone")
    assert mats[0].ambient == pytest.approx((0.1, 0.2, 0.3))
    assert mats[0].diffuse == (1.0, 0.0, 0.0)
    assert mats[0].opacity == 1.0
    assert mats[1].specular == (0.0, 1.0, 0.0)
    assert mats[1].opacity == pytest.approx(0.5)
    assert all(m.base == "assets" for m in mats)


def test_parse_mtl_maps():
    text = (
        "newmtl m\nmap_Kd diffuse.png\nmap_Ka ambient.png\nmap_Ks spec.png\n"
        "map_d alpha.png\nmap_Ns high.png\nmap_Bump bump.png\nrefl refl.png\n"
    )
    (mat,) = parse_mtl(text)
    assert mat.diffuse_map == "diffuse.png"
    assert mat.ambient_map == "ambient.png"
    assert mat.specular_map == "spec.png"
    assert mat.alpha_map == "alpha.png"
    assert mat.highlight_map == "high.png"
    assert mat.bump_map == "bump.png"
    assert mat.reflection_map == "refl.png"
    assert mat.base is None


def test_parse_mtl_disp_line_is_read_as_opacity():
    (mat,) = parse_mtl("newmtl m\ndisp height.png\n")
    assert mat.displacement_map is None
    assert mat.opacity == 0.0


def test_load_mtl_sets_base(tmp_path):
    path = tmp_path / "lib.mtl"
    path.write_text("newmtl a\nKd 0 0 1\n")
    (mat,) = load_mtl(path)
    assert mat.base == str(tmp_path)
    assert mat.diffuse == (0.0, 0.0, 1.0)


def test_load_obj_with_materials(tmp_path):
    (tmp_path / "scene.mtl").write_text(
        "newmtl red\nKd 1 0 0\nmap_Kd red.png\nnewmtl blue\nKd 0 0 1\n"
        "refl shine.png\nmap_Ks spec.png\n"
    )
    (tmp_path / "scene.obj").write_text(
        "mtllib scene.mtl\nv 0 0 0\nv 1 0 0\nv 0 1 0\n"
        "o first\nusemtl blue\nf 1 2 3\n"
        "o second\nusemtl red\nf 1 2 3\n"
    )
    model = load_obj(tmp_path / "scene.obj")
    assert len(model.materials) == 2
    assert model.mesh_material == [1, 0]
    red, blue = model.materials
    assert red.albedo_color == MaterialColor(255, 0, 0, 255)
    assert red.albedo_texture == f"{tmp_path}/red.png"
    assert blue.albedo_texture is None
    assert blue.metalness_texture == f"{tmp_path}/spec.png"


def test_load_obj_matches_parse_obj(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text(TRIANGLE)
    assert load_obj(path) == parse_obj(TRIANGLE)


def test_missing_material_library_is_ignored(tmp_path):
    model = parse_obj("mtllib nowhere.mtl\n" + TRIANGLE, str(tmp_path))
    assert model.materials == [Material()]
    assert model.meshes[0].triangle_count == 1


def test_load_obj_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "absent.obj")


def test_data_classes_hold_values():
    face = Face((Edge(1), Edge(2, 1, 1), Edge(3)))
    assert face.edges[1].normal == 1
    assert face.edges[0].texcoord == 0
    assert Mesh(vertices=[0.0] * 9).triangle_count == 1
    assert Model().meshes == []